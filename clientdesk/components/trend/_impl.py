"""
TrendAggregator - new clients per month over a trailing window.

Functional Core - pure business logic.

Key behaviors:
- Window ends with the reference month and spans a fixed number of months
- Windows cross year boundaries (e.g. Oct..Mar)
- Every month is reported, empty months with count 0
- Clients created outside the window are ignored
- max_count is at least 1 so bar heights can be divided by it
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from clientdesk.domain.entities import Client
from clientdesk.rules.models import DEFAULT_MONTH_ABBREVIATIONS

from .models import MonthBucket, MonthlyTrend

# --- Configuration ---


@dataclass(frozen=True)
class TrendConfig:
    """Trend configuration."""

    months: int = 6
    month_labels: tuple[str, ...] = field(
        default_factory=lambda: tuple(DEFAULT_MONTH_ABBREVIATIONS)
    )


DEFAULT_CONFIG = TrendConfig()


# --- Month Arithmetic ---


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months; month is 1-indexed."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def trailing_months(reference: datetime, months: int) -> list[tuple[int, int]]:
    """(year, month) pairs ending at the reference month, oldest first."""
    return [
        shift_month(reference.year, reference.month, -offset)
        for offset in range(months - 1, -1, -1)
    ]


def _creation_month(client: Client, reference: datetime) -> tuple[int, int]:
    created = client.created_at
    if created.tzinfo is not None and reference.tzinfo is not None:
        created = created.astimezone(reference.tzinfo)
    return created.year, created.month


# --- Aggregation ---


def monthly_trend(
    clients: Iterable[Client],
    reference: datetime,
    config: TrendConfig = DEFAULT_CONFIG,
) -> MonthlyTrend:
    """Count clients per creation month over the trailing window."""
    window = trailing_months(reference, config.months)
    in_window = set(window)

    counts: Counter[tuple[int, int]] = Counter()
    for client in clients:
        key = _creation_month(client, reference)
        if key in in_window:
            counts[key] += 1

    buckets = tuple(
        MonthBucket(
            year=year,
            month=month,
            label=config.month_labels[month - 1],
            count=counts[(year, month)],
        )
        for year, month in window
    )
    return MonthlyTrend(
        buckets=buckets,
        max_count=max(max((b.count for b in buckets), default=0), 1),
        total=sum(b.count for b in buckets),
    )
