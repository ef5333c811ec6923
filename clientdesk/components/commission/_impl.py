"""
CommissionFilter - dashboard commission totals.

Functional Core - pure business logic.

Key behaviors:
- Year/month match the contract start date; provider matches exactly
- "all" disables a filter
- Contracts without a start date fail any active date filter
- Filtering, summing and counting happen in one pass
- Year picker offers contract start years plus a fixed range
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from clientdesk.domain.entities import Contract
from clientdesk.rules.models import DEFAULT_MONTH_NAMES

from .models import CommissionSummary, MonthFilter, ProviderFilter, YearFilter

ALL = "all"

# --- Configuration ---


@dataclass(frozen=True)
class CommissionConfig:
    """Commission configuration."""

    first_year: int = 2023
    last_year: int = 2050
    month_names: tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_MONTH_NAMES))


DEFAULT_CONFIG = CommissionConfig()


# --- Filter Parsing ---


class FilterParseError(ValueError):
    """Raised when a raw filter value is neither "all" nor well-formed."""

    def __init__(self, code: str, message: str, field_name: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.field_name = field_name


def parse_filter_value(
    raw: str | int,
    field_name: str,
    *,
    low: int | None = None,
    high: int | None = None,
) -> int | str:
    """
    Parse a raw year/month filter into "all" or an int.

    Raises:
        FilterParseError: value is not numeric or outside [low, high].
    """
    if raw == ALL:
        return ALL
    if isinstance(raw, bool):
        raise FilterParseError(
            "filter_not_numeric",
            f"{field_name} must be 'all' or a number",
            field_name,
        )
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        digits = text[1:] if text.startswith("-") else text
        try:
            if not digits.isdecimal():
                raise ValueError(text)
            value = int(text)
        except ValueError as e:
            raise FilterParseError(
                "filter_not_numeric",
                f"{field_name} must be 'all' or a number, got '{raw}'",
                field_name,
            ) from e

    if (low is not None and value < low) or (high is not None and value > high):
        raise FilterParseError(
            "filter_out_of_range",
            f"{field_name} must be between {low} and {high}, got {value}",
            field_name,
        )
    return value


# --- Filtering ---


def contract_qualifies(
    contract: Contract,
    year: YearFilter,
    month: MonthFilter,
    provider: ProviderFilter,
) -> bool:
    """Check one contract against the three dashboard filters."""
    if provider != ALL and contract.provider != provider:
        return False
    if year == ALL and month == ALL:
        return True
    start = contract.start_date
    if start is None:
        return False
    if year != ALL and start.year != year:
        return False
    if month != ALL and start.month != month:
        return False
    return True


def filter_and_sum(
    contracts: Iterable[Contract],
    year: YearFilter = ALL,
    month: MonthFilter = ALL,
    provider: ProviderFilter = ALL,
) -> CommissionSummary:
    """Narrow contracts by the dashboard filters and total their commissions."""
    filtered: list[Contract] = []
    total = 0.0
    for contract in contracts:
        if contract_qualifies(contract, year, month, provider):
            filtered.append(contract)
            total += contract.commission or 0.0
    return CommissionSummary(filtered=tuple(filtered), total=total, count=len(filtered))


# --- Year Picker ---


def available_years(
    contracts: Sequence[Contract],
    config: CommissionConfig = DEFAULT_CONFIG,
) -> tuple[int, ...]:
    """Contract start years plus the configured range, ascending."""
    years = {c.start_date.year for c in contracts if c.start_date is not None}
    years.update(range(config.first_year, config.last_year + 1))
    return tuple(sorted(years))


# --- Period Label ---


def commission_period(
    year: YearFilter,
    month: MonthFilter,
    config: CommissionConfig = DEFAULT_CONFIG,
) -> str:
    """Human label for the period the commission total covers."""
    month_name = config.month_names[month - 1] if month != ALL else None
    if year != ALL and month_name:
        return f"{month_name} {year}"
    if year != ALL:
        return str(year)
    if month_name:
        return f"Tutti i {month_name}"
    return "Complessivo"
