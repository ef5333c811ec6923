"""
ExpiringContractsSelector - contracts ending within a rolling window.

Functional Core - pure business logic.

Key behaviors:
- today is the calendar day of the reference instant
- horizon is today plus window_days, also a whole calendar day
- Both ends are inclusive
- Open-ended contracts (no end date) never expire
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta

from clientdesk.domain.entities import Contract

from .models import ExpiryWindow

# --- Configuration ---


@dataclass(frozen=True)
class ExpiringConfig:
    """Expiring-contract configuration."""

    window_days: int = 30


DEFAULT_CONFIG = ExpiringConfig()


def expiry_window(reference: datetime, config: ExpiringConfig = DEFAULT_CONFIG) -> ExpiryWindow:
    """Calendar-day window anchored at the reference instant's local day."""
    today = reference.date()
    return ExpiryWindow(today=today, horizon=today + timedelta(days=config.window_days))


def select_expiring(
    contracts: Iterable[Contract],
    reference: datetime,
    config: ExpiringConfig = DEFAULT_CONFIG,
) -> list[Contract]:
    """Contracts whose end date falls inside the expiry window, in input order."""
    window = expiry_window(reference, config)
    return [
        contract
        for contract in contracts
        if contract.end_date is not None and window.contains(contract.end_date)
    ]
