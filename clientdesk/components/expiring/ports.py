"""
Expiring contracts component port definitions.
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
    """Port for expiring-contract rules configuration."""

    def get_expiring_window_days(self) -> int:
        """Get the number of calendar days ahead that count as expiring."""
        ...
