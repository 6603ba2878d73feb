"""
shared/schemas.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
D-Day Counter: pydantic value objects for the metrics engine
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""
from __future__ import annotations

from datetime import date
from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from config.settings import settings

# Immutable holiday dates for one (country, year)
HolidaySet = FrozenSet[date]

EMPTY_HOLIDAYS: HolidaySet = frozenset()


# ── Core schemas ───────────────────────────────────────────────────────────

class DateRange(BaseModel):
    """Inclusive [start, end] pair of calendar dates."""
    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    @property
    def is_valid(self) -> bool:
        return self.start <= self.end


class WorkingDayResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    calendar_days: int = Field(ge=1)
    work_days: int = Field(ge=0)
    weekend_days: int = Field(default=0, ge=0)
    holiday_days: int = Field(default=0, ge=0, description="Holidays on weekdays")

    @model_validator(mode="after")
    def _work_days_bounded(self) -> "WorkingDayResult":
        if self.work_days > self.calendar_days:
            raise ValueError("work_days cannot exceed calendar_days")
        return self


class MessageBracket(BaseModel):
    """Pool of messages for calendar-day counts in [lower, upper]; None = unbounded."""
    model_config = ConfigDict(frozen=True)

    lower: Optional[int] = None
    upper: Optional[int] = None
    messages: Tuple[str, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _bounds_ordered(self) -> "MessageBracket":
        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            raise ValueError(f"bracket lower {self.lower} > upper {self.upper}")
        return self

    def contains(self, days: int) -> bool:
        if self.lower is not None and days < self.lower:
            return False
        if self.upper is not None and days > self.upper:
            return False
        return True


class Metrics(BaseModel):
    """Output of computeMetrics, consumed by the surrounding UI."""
    model_config = ConfigDict(frozen=True)

    calendar_days: Optional[int] = None
    work_days: Optional[int] = None
    percentage: float = Field(default=0.0, ge=0.0, le=100.0)
    message: str = settings.neutral_message
    country: Optional[str] = None
    show_progress: bool = False

    @classmethod
    def placeholder(cls) -> "Metrics":
        """Neutral values the UI shows instead of stale or negative metrics."""
        return cls()
