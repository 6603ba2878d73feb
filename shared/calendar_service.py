"""
shared/calendar_service.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Public-holiday resolution per (country, year) with a process-wide cache.
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Sources:
  StaticHolidayProvider   in-memory table
  LibraryHolidayProvider  rule-derived, via the `holidays` package

HolidayCalendar wraps a source, memoizes results and degrades a failing
source to an empty holiday set.
"""
from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

import holidays

from config.settings import CalendarConfig, settings
from shared.exceptions import HolidayProviderUnavailable
from shared.schemas import EMPTY_HOLIDAYS, HolidaySet

logger = logging.getLogger(__name__)


# ── Static holiday table (2024-2025) ───────────────────────────────────────

_KR_HOLIDAYS = {
    # 2024
    date(2024, 1, 1),    # New Year
    date(2024, 2, 9),    # Seollal
    date(2024, 2, 10),
    date(2024, 2, 11),
    date(2024, 2, 12),   # Seollal substitute
    date(2024, 3, 1),    # Independence Movement Day
    date(2024, 4, 10),   # National Assembly election
    date(2024, 5, 5),    # Children's Day
    date(2024, 5, 6),    # Children's Day substitute
    date(2024, 5, 15),   # Buddha's Birthday
    date(2024, 6, 6),    # Memorial Day
    date(2024, 8, 15),   # Liberation Day
    date(2024, 9, 16),   # Chuseok
    date(2024, 9, 17),
    date(2024, 9, 18),
    date(2024, 10, 1),   # Armed Forces Day (temporary)
    date(2024, 10, 3),   # National Foundation Day
    date(2024, 10, 9),   # Hangul Day
    date(2024, 12, 25),
    # 2025
    date(2025, 1, 1),
    date(2025, 1, 27),   # Temporary holiday
    date(2025, 1, 28),   # Seollal
    date(2025, 1, 29),
    date(2025, 1, 30),
    date(2025, 3, 1),
    date(2025, 3, 3),    # Independence Movement Day substitute
    date(2025, 5, 5),    # Children's Day, Buddha's Birthday
    date(2025, 5, 6),    # substitute
    date(2025, 6, 3),    # Presidential election
    date(2025, 6, 6),
    date(2025, 8, 15),
    date(2025, 10, 3),
    date(2025, 10, 5),   # Chuseok
    date(2025, 10, 6),
    date(2025, 10, 7),
    date(2025, 10, 8),   # Chuseok substitute
    date(2025, 10, 9),
    date(2025, 12, 25),
}

_HOLIDAY_MAP: Dict[str, Iterable[date]] = {
    "KR": _KR_HOLIDAYS,
}


def normalize_country(code: Optional[str]) -> Optional[str]:
    """Upper-case and strip a country code; empty means unset."""
    if not code:
        return None
    code = str(code).strip().upper()
    return code or None


def supported_countries(config: Optional[CalendarConfig] = None) -> List[Tuple[str, str]]:
    cfg = config or settings.calendar
    return sorted(cfg.supported_countries.items(), key=lambda kv: kv[1])


# ── Sources ────────────────────────────────────────────────────────────────

class StaticHolidayProvider:
    """Holidays from a fixed {country: dates} table."""

    def __init__(self, table: Optional[Mapping[str, Iterable[date]]] = None):
        source = _HOLIDAY_MAP if table is None else table
        self._table: Dict[str, HolidaySet] = {
            normalize_country(code): frozenset(days) for code, days in source.items()
        }

    def supports(self, country: Optional[str]) -> bool:
        return normalize_country(country) in self._table

    def get_holidays(self, country: Optional[str], year: int) -> HolidaySet:
        days = self._table.get(normalize_country(country), EMPTY_HOLIDAYS)
        return frozenset(d for d in days if d.year == year)


class LibraryHolidayProvider:
    """Rule-derived holidays from the `holidays` package."""

    def __init__(self, countries: Optional[Iterable[str]] = None):
        codes = countries if countries is not None else settings.calendar.supported_countries
        self.countries = frozenset(normalize_country(c) for c in codes)

    def supports(self, country: Optional[str]) -> bool:
        return normalize_country(country) in self.countries

    def get_holidays(self, country: Optional[str], year: int) -> HolidaySet:
        country = normalize_country(country)
        if country not in self.countries:
            return EMPTY_HOLIDAYS
        try:
            calendar = holidays.country_holidays(country, years=year)
        except Exception as exc:
            raise HolidayProviderUnavailable(country, year, str(exc)) from exc
        return frozenset(d for d in calendar.keys() if d.year == year)


# ── Cached provider ────────────────────────────────────────────────────────

class HolidayCalendar:
    """
    HolidayCalendarProvider used by the engine.

    Memoizes per (country, year). Unknown or unset countries resolve to an
    empty set; an unavailable source degrades to an empty set which is
    not cached, so a later call can still succeed.
    """

    def __init__(self, source=None):
        self.source = source if source is not None else LibraryHolidayProvider()
        self._cache: Dict[Tuple[Optional[str], int], HolidaySet] = {}
        self._lock = threading.Lock()

    def get_holidays(self, country: Optional[str], year: int) -> HolidaySet:
        country = normalize_country(country)
        # Unsupported codes are never cached
        if country is None or not self.source.supports(country):
            return EMPTY_HOLIDAYS

        key = (country, year)
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            resolved = frozenset(self.source.get_holidays(country, year))
        except HolidayProviderUnavailable as exc:
            logger.warning("%s; counting weekends only", exc)
            return EMPTY_HOLIDAYS

        with self._lock:
            # First writer wins; every writer computed an equal set
            resolved = self._cache.setdefault(key, resolved)
        logger.debug("Cached %d holidays for %s/%d", len(resolved), country, year)
        return resolved

    def get_holidays_for_range(
        self, country: Optional[str], start: date, end: date
    ) -> HolidaySet:
        """Union of holiday sets for every year in [start, end], clipped to the range."""
        days = set()
        for year in range(start.year, end.year + 1):
            days.update(self.get_holidays(country, year))
        return frozenset(d for d in days if start <= d <= end)

    def is_holiday(self, d: date, country: Optional[str]) -> bool:
        return d in self.get_holidays(country, d.year)

    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()


def build_holiday_calendar(config: Optional[CalendarConfig] = None) -> HolidayCalendar:
    """HolidayCalendar backed by the source named in settings."""
    cfg = config or settings.calendar
    if cfg.holiday_source == "static":
        return HolidayCalendar(StaticHolidayProvider())
    if cfg.holiday_source == "library":
        return HolidayCalendar(LibraryHolidayProvider(cfg.supported_countries))
    raise ValueError(f"Unknown holiday source: {cfg.holiday_source!r}")


calendar = build_holiday_calendar()
