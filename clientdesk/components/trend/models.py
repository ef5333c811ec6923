"""
Client trend component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from clientdesk.domain.entities import Client

# --- Input Models ---


@dataclass(frozen=True)
class TrendInput:
    """
    Input for the trailing monthly client trend.

    When reference is None the component asks its TimePort for "now".
    """

    clients: Sequence[Client]
    reference: datetime | None = None


# --- Output Models ---


@dataclass(frozen=True)
class MonthBucket:
    """One calendar month of the trend."""

    year: int
    month: int
    label: str
    count: int = 0

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class MonthlyTrend:
    """Fixed-size trend, oldest month first."""

    buckets: tuple[MonthBucket, ...]
    max_count: int
    total: int


@dataclass(frozen=True)
class TrendOutput:
    """Output for the client trend."""

    trend: MonthlyTrend
