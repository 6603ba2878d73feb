"""
shared/exceptions.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Error taxonomy for the metrics engine.
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Only InvalidRange reaches callers. HolidayProviderUnavailable is raised by
holiday sources and absorbed by HolidayCalendar.
"""
from __future__ import annotations

from datetime import date
from typing import Optional


class DDayError(Exception):
    """Base class for engine errors."""


class InvalidRange(DDayError, ValueError):
    """End date precedes start date."""

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end
        super().__init__(f"end date {end.isoformat()} is before start date {start.isoformat()}")


class HolidayProviderUnavailable(DDayError):
    """Backing holiday data could not be resolved."""

    def __init__(self, country: str, year: int, reason: Optional[str] = None):
        self.country = country
        self.year = year
        msg = f"holidays unavailable for {country}/{year}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
