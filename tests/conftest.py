from __future__ import annotations

import random
from datetime import date

import pytest

from engine.metrics import MetricsEngine
from shared.calendar_service import HolidayCalendar, StaticHolidayProvider


@pytest.fixture
def holiday_table() -> dict:
    return {
        "KR": [
            date(2024, 1, 1),    # Monday
            date(2024, 1, 6),    # Saturday
            date(2024, 7, 1),    # Monday
            date(2024, 12, 31),  # Tuesday
            date(2025, 1, 1),    # Wednesday
        ],
    }


@pytest.fixture
def holiday_calendar(holiday_table: dict) -> HolidayCalendar:
    return HolidayCalendar(StaticHolidayProvider(holiday_table))


@pytest.fixture
def engine(holiday_calendar: HolidayCalendar) -> MetricsEngine:
    return MetricsEngine(holiday_calendar, rng=random.Random(7))
