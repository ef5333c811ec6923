"""
Client trend component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TimePort(Protocol):
    """Time provider interface."""

    def now_local(self) -> datetime:
        """Get current local time."""
        ...


class RulesPort(Protocol):
    """Port for trend rules configuration."""

    def get_trend_months(self) -> int:
        """Get the number of trailing months in the trend."""
        ...

    def get_month_abbreviations(self) -> list[str]:
        """Get the twelve month abbreviations, January first."""
        ...
