"""
Commission component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from clientdesk.domain.entities import AllFilter, Contract

YearFilter = int | AllFilter
MonthFilter = int | AllFilter
ProviderFilter = str

# --- Validation Error ---


@dataclass(frozen=True)
class CommissionValidationError:
    """Commission filter validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CommissionInput:
    """
    Input for filtering contracts and summing commissions.

    Filter values may be raw strings (query params, CLI flags) or already
    typed; "all" disables a filter.
    """

    contracts: Sequence[Contract]
    year: str | int = "all"
    month: str | int = "all"
    provider: str = "all"


@dataclass(frozen=True)
class AvailableYearsInput:
    """Input for listing the years offered by the year picker."""

    contracts: Sequence[Contract]


# --- Output Models ---


@dataclass(frozen=True)
class CommissionSummary:
    """Qualifying contracts with their commission total and count."""

    filtered: tuple[Contract, ...] = ()
    total: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class CommissionOutput:
    """Output for a commission query."""

    summary: CommissionSummary | None
    year: YearFilter | None = None
    month: MonthFilter | None = None
    provider: ProviderFilter | None = None
    period: str | None = None
    errors: list[CommissionValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class AvailableYearsOutput:
    """Output for the year picker."""

    years: tuple[int, ...]
