"""
Local Time Adapter (TimePort implementation).

Supplies the reference instant for expiring-contract and trend windows.

Key behaviors:
- now_local: Returns current time in the configured IANA timezone
- FrozenClock pins "now" for tests and reproducible CLI runs (--now)
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Europe/Rome"


class LocalClock:
    """Time adapter for the dashboard's display timezone."""

    def __init__(self, tz_name: str = DEFAULT_TIMEZONE) -> None:
        """
        Initialize with specified timezone.

        Args:
            tz_name: IANA timezone name (default: Europe/Rome)
        """
        self._tz_name = tz_name
        self._tz = ZoneInfo(tz_name)

    def now_local(self) -> datetime:
        """Get current time in the display timezone."""
        return datetime.now(self._tz)

    @property
    def timezone_name(self) -> str:
        """Get the display timezone name."""
        return self._tz_name


class FrozenClock:
    """Clock pinned to a fixed local instant."""

    def __init__(self, frozen_local: datetime, tz_name: str = DEFAULT_TIMEZONE) -> None:
        self._tz_name = tz_name
        tz = ZoneInfo(tz_name)
        if frozen_local.tzinfo is None:
            frozen_local = frozen_local.replace(tzinfo=tz)
        self._now = frozen_local.astimezone(tz)

    def now_local(self) -> datetime:
        return self._now

    @property
    def timezone_name(self) -> str:
        return self._tz_name


def create_clock(
    tz_name: str = DEFAULT_TIMEZONE, frozen_local: datetime | None = None
) -> LocalClock | FrozenClock:
    """Live clock for the zone, or a frozen one when an instant is pinned."""
    if frozen_local is not None:
        return FrozenClock(frozen_local, tz_name)
    return LocalClock(tz_name)
