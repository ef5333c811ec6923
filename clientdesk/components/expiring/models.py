"""
Expiring contracts component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime

from clientdesk.domain.entities import Contract

# --- Input Models ---


@dataclass(frozen=True)
class ExpiringInput:
    """
    Input for selecting contracts about to expire.

    When reference is None the component asks its TimePort for "now".
    """

    contracts: Sequence[Contract]
    reference: datetime | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ExpiryWindow:
    """Inclusive calendar-day window [today, horizon]."""

    today: date
    horizon: date

    def contains(self, day: date) -> bool:
        return self.today <= day <= self.horizon


@dataclass(frozen=True)
class ExpiringOutput:
    """Output for expiring-contract selection."""

    contracts: tuple[Contract, ...]
    window: ExpiryWindow

    @property
    def count(self) -> int:
        return len(self.contracts)
