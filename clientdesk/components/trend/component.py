"""
Client trend component - New clients over the last months.

Invariants:
- I1: Always exactly `months` buckets, oldest first
- I2: Sum of counts equals clients created inside the window
- I3: max_count >= 1
"""

from __future__ import annotations

from ._impl import TrendConfig, monthly_trend
from .models import TrendInput, TrendOutput
from .ports import RulesPort, TimePort


def _build_config(rules: RulesPort | None) -> TrendConfig:
    """Build trend config from rules port."""
    if rules is None:
        return TrendConfig()
    return TrendConfig(
        months=rules.get_trend_months(),
        month_labels=tuple(rules.get_month_abbreviations()),
    )


# --- Component Entry Points ---


def run_trend(
    inp: TrendInput,
    *,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> TrendOutput:
    """
    Aggregate client creation dates into monthly buckets.

    Args:
        inp: Clients and an optional reference instant.
        time_port: Required when inp.reference is None.
        rules: Optional rules port for configuration.

    Returns:
        TrendOutput with the monthly buckets.
    """
    reference = inp.reference
    if reference is None:
        if time_port is None:
            raise ValueError("TimePort is required when no reference instant is given")
        reference = time_port.now_local()

    return TrendOutput(trend=monthly_trend(inp.clients, reference, _build_config(rules)))


def run(
    inp: TrendInput,
    *,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> TrendOutput:
    """Main entry point for the client trend component."""
    if isinstance(inp, TrendInput):
        return run_trend(inp, time_port=time_port, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
