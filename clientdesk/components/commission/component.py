"""
Commission component - Commission totals for the dashboard.

Filters contracts by start year, start month and provider, then reduces
the survivors to a commission total and a count.

Invariants:
- I1: "all" disables a filter
- I2: Contracts without a start date fail any active date filter
- I3: total and count describe exactly the filtered contracts
- I4: Malformed filters are reported, never raised
"""

from __future__ import annotations

from ._impl import (
    CommissionConfig,
    FilterParseError,
    available_years,
    commission_period,
    filter_and_sum,
    parse_filter_value,
)
from .models import (
    AvailableYearsInput,
    AvailableYearsOutput,
    CommissionInput,
    CommissionOutput,
    CommissionValidationError,
)
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> CommissionConfig:
    """Build commission config from rules port."""
    if rules is None:
        return CommissionConfig()
    first_year, last_year = rules.get_year_range()
    return CommissionConfig(
        first_year=first_year,
        last_year=last_year,
        month_names=tuple(rules.get_month_names()),
    )


def _convert_error(error: FilterParseError) -> CommissionValidationError:
    return CommissionValidationError(
        code=error.code,
        message=error.message,
        field=error.field_name,
    )


# --- Component Entry Points ---


def run_commission(
    inp: CommissionInput,
    *,
    rules: RulesPort | None = None,
) -> CommissionOutput:
    """
    Filter contracts and sum their commissions.

    Args:
        inp: Contracts plus raw or typed year/month/provider filters.
        rules: Optional rules port for configuration.

    Returns:
        CommissionOutput with the summary, or validation errors.
    """
    config = _build_config(rules)
    errors: list[CommissionValidationError] = []

    year = month = None
    try:
        year = parse_filter_value(inp.year, "year")
    except FilterParseError as e:
        errors.append(_convert_error(e))
    try:
        month = parse_filter_value(inp.month, "month", low=1, high=12)
    except FilterParseError as e:
        errors.append(_convert_error(e))

    provider = inp.provider or "all"
    if errors:
        return CommissionOutput(summary=None, errors=errors, success=False)

    summary = filter_and_sum(inp.contracts, year, month, provider)
    return CommissionOutput(
        summary=summary,
        year=year,
        month=month,
        provider=provider,
        period=commission_period(year, month, config),
    )


def run_available_years(
    inp: AvailableYearsInput,
    *,
    rules: RulesPort | None = None,
) -> AvailableYearsOutput:
    """List the years offered by the dashboard year picker."""
    config = _build_config(rules)
    return AvailableYearsOutput(years=available_years(inp.contracts, config))


def run(
    inp: CommissionInput | AvailableYearsInput,
    *,
    rules: RulesPort | None = None,
) -> CommissionOutput | AvailableYearsOutput:
    """
    Main entry point for the commission component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, CommissionInput):
        return run_commission(inp, rules=rules)
    elif isinstance(inp, AvailableYearsInput):
        return run_available_years(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
