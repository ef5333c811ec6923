"""
Dashboard component - One snapshot of every dashboard widget.

Computes, for a client/contract snapshot and a filter selection:
- total clients
- commission total/count for the selected year, month and provider
- contracts expiring in the alert window, with client names
- trailing monthly new-client trend
- energy/gas and telephony provider tallies
- year picker values and the sorted provider catalogue

Invariants:
- I1: One reference instant is used for every date window
- I2: Invalid filters fail the whole snapshot with validation errors
- I3: Inputs are never mutated
"""

from __future__ import annotations

from clientdesk.components.commission import (
    AvailableYearsInput,
    CommissionInput,
    run_available_years,
    run_commission,
)
from clientdesk.components.directory import (
    client_display_name,
    index_clients,
    sorted_providers,
)
from clientdesk.components.expiring import ExpiringInput, run_expiring
from clientdesk.components.providers import CategoryTallyInput, run_category_tallies
from clientdesk.components.trend import TrendInput, run_trend

from .models import DashboardInput, DashboardOutput, ExpiringAlert
from .ports import RulesPort, TimePort

# --- Component Entry Points ---


def run_dashboard(
    inp: DashboardInput,
    *,
    rules: RulesPort,
    time_port: TimePort | None = None,
) -> DashboardOutput:
    """
    Build the full dashboard snapshot.

    Args:
        inp: Snapshot, filter selection and optional reference instant.
        rules: Rules port for every composed component.
        time_port: Required when inp.reference is None.

    Returns:
        DashboardOutput with every widget's data, or validation errors.
    """
    reference = inp.reference
    if reference is None:
        if time_port is None:
            raise ValueError("TimePort is required when no reference instant is given")
        reference = time_port.now_local()

    commission = run_commission(
        CommissionInput(
            contracts=inp.contracts,
            year=inp.year,
            month=inp.month,
            provider=inp.provider,
        ),
        rules=rules,
    )
    if not commission.success:
        return DashboardOutput(
            reference=reference,
            commission=commission,
            errors=list(commission.errors),
            success=False,
        )

    expiring = run_expiring(ExpiringInput(inp.contracts, reference), rules=rules)
    by_id = index_clients(inp.clients)
    unknown = rules.get_unknown_client_label()
    alerts = tuple(
        ExpiringAlert(
            contract=contract,
            client_name=client_display_name(contract.client_id, by_id, unknown),
        )
        for contract in expiring.contracts
    )

    tallies = run_category_tallies(CategoryTallyInput(inp.contracts), rules=rules)

    return DashboardOutput(
        reference=reference,
        total_clients=len(inp.clients),
        commission=commission,
        expiring=alerts,
        expiring_window=expiring.window,
        trend=run_trend(TrendInput(inp.clients, reference), rules=rules).trend,
        energy=tallies.energy,
        telephony=tallies.telephony,
        available_years=run_available_years(
            AvailableYearsInput(inp.contracts), rules=rules
        ).years,
        providers=tuple(sorted_providers(inp.providers)),
    )


def run(
    inp: DashboardInput,
    *,
    rules: RulesPort,
    time_port: TimePort | None = None,
) -> DashboardOutput:
    """Main entry point for the dashboard component."""
    if isinstance(inp, DashboardInput):
        return run_dashboard(inp, rules=rules, time_port=time_port)
    raise ValueError(f"Unknown input type: {type(inp)}")
