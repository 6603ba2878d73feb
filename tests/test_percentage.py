"""
Tests for PercentageNormalizer.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from engine.percentage import PercentageNormalizer
from shared.schemas import DateRange


@pytest.fixture
def normalizer() -> PercentageNormalizer:
    return PercentageNormalizer()


def test_baseline_is_two_calendar_years_back(normalizer: PercentageNormalizer) -> None:
    assert normalizer.baseline(date(2024, 1, 1)) == date(2022, 1, 1)


def test_baseline_absorbs_leap_day(normalizer: PercentageNormalizer) -> None:
    assert normalizer.baseline(date(2024, 2, 29)) == date(2022, 2, 28)


def test_start_on_baseline(normalizer: PercentageNormalizer) -> None:
    assert normalizer.normalize(DateRange(start=date(2022, 1, 1), end=date(2024, 1, 1))) == 0.1


def test_halfway(normalizer: PercentageNormalizer) -> None:
    # 365 elapsed days of 730
    assert normalizer.normalize(DateRange(start=date(2022, 12, 31), end=date(2024, 1, 1))) == 50.0


def test_day_before_target_is_full(normalizer: PercentageNormalizer) -> None:
    assert normalizer.normalize(DateRange(start=date(2023, 12, 31), end=date(2024, 1, 1))) == 100.0


def test_before_window_clamps_to_zero(normalizer: PercentageNormalizer) -> None:
    span = DateRange(start=date(2021, 12, 30), end=date(2024, 1, 1))
    assert normalizer.raw(span) < 0
    assert normalizer.normalize(span) == 0.0


def test_past_window_clamps_to_zero_not_hundred(normalizer: PercentageNormalizer) -> None:
    span = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 1))
    assert normalizer.raw(span) > 100
    assert normalizer.normalize(span) == 0.0


@pytest.mark.parametrize("offset", [-400, -1, 0, 1, 100, 333, 729, 730, 900])
def test_result_in_bounds_with_one_decimal(normalizer: PercentageNormalizer, offset: int) -> None:
    end = date(2025, 3, 15)
    span = DateRange(start=normalizer.baseline(end) + timedelta(days=offset), end=end)
    value = normalizer.normalize(span)
    assert 0.0 <= value <= 100.0
    assert round(value, 1) == value


def test_baseline_before_year_one_is_out_of_window(normalizer: PercentageNormalizer) -> None:
    span = DateRange(start=date(1, 6, 1), end=date(2, 1, 1))
    assert normalizer.baseline(span.end) is None
    assert normalizer.normalize(span) == 0.0


def test_window_ending_on_last_representable_date(normalizer: PercentageNormalizer) -> None:
    span = DateRange(start=date(9999, 12, 25), end=date(9999, 12, 31))
    assert normalizer.normalize(span) == 99.3
