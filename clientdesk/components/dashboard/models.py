"""
Dashboard component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from clientdesk.components.commission import CommissionOutput, CommissionValidationError
from clientdesk.components.expiring import ExpiryWindow
from clientdesk.components.providers import TallyOutput
from clientdesk.components.trend import MonthlyTrend
from clientdesk.domain.entities import Client, Contract

# --- Input Models ---


@dataclass(frozen=True)
class DashboardInput:
    """Snapshot plus the dashboard filter selection."""

    clients: Sequence[Client]
    contracts: Sequence[Contract]
    providers: Sequence[str] = ()
    year: str | int = "all"
    month: str | int = "all"
    provider: str = "all"
    reference: datetime | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ExpiringAlert:
    """An expiring contract with its resolved client name."""

    contract: Contract
    client_name: str


@dataclass(frozen=True)
class DashboardOutput:
    """Every dashboard derivation for one snapshot and filter selection."""

    reference: datetime | None
    total_clients: int = 0
    commission: CommissionOutput | None = None
    expiring: tuple[ExpiringAlert, ...] = ()
    expiring_window: ExpiryWindow | None = None
    trend: MonthlyTrend | None = None
    energy: TallyOutput | None = None
    telephony: TallyOutput | None = None
    available_years: tuple[int, ...] = ()
    providers: tuple[str, ...] = ()
    errors: list[CommissionValidationError] = field(default_factory=list)
    success: bool = True
