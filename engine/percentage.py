"""
engine/percentage.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
Progress percentage over the two-year window ending at the target date.
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
  baseline = end - 2 calendar years
  elapsed  = (start - baseline).days + 1
  raw      = elapsed / 730 * 100

Out-of-window values (raw < 0 or raw > 100) report 0.0, not the nearest
bound.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

import pandas as pd

from config.settings import ProgressConfig, settings
from shared.schemas import DateRange


class PercentageNormalizer:

    def __init__(self, config: Optional[ProgressConfig] = None):
        cfg = config or settings.progress
        self.window_years = cfg.window_years
        self.window_days = cfg.window_days
        self.precision = Decimal(cfg.precision)

    def baseline(self, end: date) -> Optional[date]:
        """Calendar-year subtraction; Feb 29 lands on Feb 28. None before year 1."""
        try:
            return (pd.Timestamp(end) - pd.DateOffset(years=self.window_years)).date()
        except (ValueError, OverflowError):
            return None

    def raw(self, date_range: DateRange) -> Optional[float]:
        baseline = self.baseline(date_range.end)
        if baseline is None:
            return None
        elapsed = (date_range.start - baseline).days + 1
        return elapsed / self.window_days * 100

    def normalize(self, date_range: DateRange) -> float:
        raw = self.raw(date_range)
        # No baseline counts as out of window
        if raw is None or raw < 0 or raw > 100:
            return 0.0
        return float(Decimal(repr(raw)).quantize(self.precision, rounding=ROUND_HALF_UP))
