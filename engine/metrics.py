"""
engine/metrics.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
D-Day metrics: working days, calendar days, progress and message
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Entry point for the surrounding application:

  engine.compute_metrics("KR", DateRange(start=today, end=target))

Only InvalidRange is raised. Missing holiday data falls back to counting
weekends only.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from config.settings import settings
from engine.messages import MessageSelector
from engine.percentage import PercentageNormalizer
from engine.working_days import WorkingDayCounter
from shared.calendar_service import HolidayCalendar, normalize_country
from shared.schemas import DateRange, Metrics

logger = logging.getLogger(__name__)


class MetricsEngine:
    """
    Combines the three calculations for one (country, range) request.

    The random source is injected so message selection can be reproduced.
    """

    def __init__(
        self,
        holiday_calendar: Optional[HolidayCalendar] = None,
        rng: Optional[random.Random] = None,
        counter: Optional[WorkingDayCounter] = None,
        normalizer: Optional[PercentageNormalizer] = None,
        selector: Optional[MessageSelector] = None,
    ):
        if counter is not None and holiday_calendar is not None:
            raise ValueError("pass either holiday_calendar or counter, not both")
        self.counter = counter or WorkingDayCounter(holiday_calendar)
        self.normalizer = normalizer or PercentageNormalizer()
        self.selector = selector or MessageSelector()
        self.rng = rng or random.Random()

    @property
    def calendar(self) -> HolidayCalendar:
        return self.counter.calendar

    def compute_metrics(self, country_code: Optional[str], date_range: DateRange) -> Metrics:
        country = normalize_country(country_code)
        counts = self.counter.count(country, date_range)
        percentage = self.normalizer.normalize(date_range)
        message = self.selector.select(counts.calendar_days, self.rng)

        logger.info(
            "Metrics %s %s..%s: %d working / %d calendar, %.1f%%",
            country or "-", date_range.start, date_range.end,
            counts.work_days, counts.calendar_days, percentage,
        )
        return Metrics(
            calendar_days=counts.calendar_days,
            work_days=counts.work_days,
            percentage=percentage,
            message=message,
            country=country,
            show_progress=country in settings.calendar.progress_countries,
        )
