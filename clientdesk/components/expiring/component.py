"""
Expiring contracts component - Renewal alerts.

Invariants:
- I1: Window is [today, today + window_days], inclusive, whole days
- I2: Contracts without an end date are never expiring
- I3: Input order preserved
"""

from __future__ import annotations

from ._impl import ExpiringConfig, expiry_window, select_expiring
from .models import ExpiringInput, ExpiringOutput
from .ports import RulesPort, TimePort


def _build_config(rules: RulesPort | None) -> ExpiringConfig:
    """Build expiring config from rules port."""
    if rules is None:
        return ExpiringConfig()
    return ExpiringConfig(window_days=rules.get_expiring_window_days())


# --- Component Entry Points ---


def run_expiring(
    inp: ExpiringInput,
    *,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ExpiringOutput:
    """
    Select contracts expiring within the configured window.

    Args:
        inp: Contracts and an optional reference instant.
        time_port: Required when inp.reference is None.
        rules: Optional rules port for configuration.

    Returns:
        ExpiringOutput with the selected contracts and the window used.
    """
    reference = inp.reference
    if reference is None:
        if time_port is None:
            raise ValueError("TimePort is required when no reference instant is given")
        reference = time_port.now_local()

    config = _build_config(rules)
    return ExpiringOutput(
        contracts=tuple(select_expiring(inp.contracts, reference, config)),
        window=expiry_window(reference, config),
    )


def run(
    inp: ExpiringInput,
    *,
    time_port: TimePort | None = None,
    rules: RulesPort | None = None,
) -> ExpiringOutput:
    """Main entry point for the expiring contracts component."""
    if isinstance(inp, ExpiringInput):
        return run_expiring(inp, time_port=time_port, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
