"""
engine/working_days.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Calendar-day and working-day counts over an inclusive date range.
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
A day is a weekend day (Sat/Sun), a holiday (in the country's holiday set
for its year), or a working day. Holidays on weekends are excluded once.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import numpy as np

from config.settings import CalendarConfig, settings
from shared.calendar_service import HolidayCalendar, calendar as default_calendar
from shared.exceptions import InvalidRange
from shared.schemas import DateRange, WorkingDayResult

logger = logging.getLogger(__name__)


class WorkingDayCounter:

    def __init__(
        self,
        holiday_calendar: Optional[HolidayCalendar] = None,
        config: Optional[CalendarConfig] = None,
    ):
        cfg = config or settings.calendar
        self.calendar = holiday_calendar or default_calendar
        self.weekmask = cfg.weekmask

    def is_weekend(self, d: date) -> bool:
        return not np.is_busday(d, weekmask=self.weekmask)

    def is_working_day(self, country: Optional[str], d: date) -> bool:
        return not self.is_weekend(d) and not self.calendar.is_holiday(d, country)

    def count(self, country: Optional[str], date_range: DateRange) -> WorkingDayResult:
        """
        Count calendar and working days in [start, end].

        Raises InvalidRange when end < start.
        """
        start, end = date_range.start, date_range.end
        if not date_range.is_valid:
            raise InvalidRange(start, end)

        # busday_count is half-open; datetime64 steps past 9999-12-31
        stop = np.datetime64(end, "D") + 1
        calendar_days = (end - start).days + 1

        holiday_days = np.array(
            sorted(self.calendar.get_holidays_for_range(country, start, end)),
            dtype="datetime64[D]",
        )
        weekdays = int(np.busday_count(start, stop, weekmask=self.weekmask))
        work_days = int(np.busday_count(
            start, stop, weekmask=self.weekmask, holidays=holiday_days,
        ))

        result = WorkingDayResult(
            calendar_days=calendar_days,
            work_days=work_days,
            weekend_days=calendar_days - weekdays,
            holiday_days=weekdays - work_days,
        )
        logger.debug(
            "count %s %s..%s -> %d calendar / %d working",
            country or "-", start, end, result.calendar_days, result.work_days,
        )
        return result
