"""
Time port interface.

The engine never reads the wall clock. Shells obtain the reference instant
from a TimePort and pass it into every date-window derivation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TimePort(Protocol):
    """Time provider interface."""

    def now_local(self) -> datetime:
        """Get current time in the dashboard's display timezone."""
        ...

    @property
    def timezone_name(self) -> str:
        """Get the display timezone name (e.g., 'Europe/Rome')."""
        ...
