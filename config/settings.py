"""
config/settings.py
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
D-Day Counter: Configuration
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass
class CalendarConfig:
    """Weekend and holiday parameters."""
    # numpy weekmask, Monday first: Sat/Sun off
    weekmask: str = "1111100"

    # "library" = rule-derived via the holidays package, "static" = built-in table
    holiday_source: str = "library"

    supported_countries: Dict[str, str] = field(default_factory=lambda: {
        "KR": "South Korea",
        "US": "United States",
        "GB": "United Kingdom",
        "JP": "Japan",
        "DE": "Germany",
        "FR": "France",
        "CA": "Canada",
        "AU": "Australia",
        "AE": "United Arab Emirates",
    })

    # Countries whose UI shows the progress bar and message card
    progress_countries: Tuple[str, ...] = ("KR",)


@dataclass
class ProgressConfig:
    """Progress window parameters."""
    window_years: int = 2
    # Nominal window length; constant regardless of leap years
    window_days: int = 730
    precision: str = "0.1"


@dataclass
class Settings:
    """Top-level settings."""
    web_port: int = 5050
    log_level: str = "INFO"

    # Date format the surrounding app stores target dates in
    date_format: str = "%Y/%m/%d"
    neutral_message: str = "🎁"

    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    progress: ProgressConfig = field(default_factory=ProgressConfig)


settings = Settings()
