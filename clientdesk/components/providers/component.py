"""
Provider tally component - Contracts per provider for the dashboard widgets.

Invariants:
- I1: Every tracked provider appears, absent ones with count 0
- I2: Matching is case-insensitive and exact
- I3: The tally never assumes which category it receives
"""

from __future__ import annotations

from ._impl import partition_by_category, tally
from .models import CategoryTallyInput, CategoryTallyOutput, TallyInput, TallyOutput
from .ports import RulesPort

# --- Component Entry Points ---


def run_tally(inp: TallyInput) -> TallyOutput:
    """
    Tally contracts for an explicit list of tracked providers.

    Args:
        inp: Pre-filtered contracts and the providers to count.

    Returns:
        TallyOutput with one count per tracked provider.
    """
    return TallyOutput(
        counts=tuple(tally(inp.contracts, inp.tracked)),
        total_contracts=len(inp.contracts),
    )


def run_category_tallies(
    inp: CategoryTallyInput,
    *,
    rules: RulesPort,
) -> CategoryTallyOutput:
    """
    Partition contracts by category and tally each with its tracked list.

    Args:
        inp: All contracts.
        rules: Rules port supplying the tracked providers per category.

    Returns:
        CategoryTallyOutput with the energy/gas and telephony tallies.
    """
    energy, telephony = partition_by_category(inp.contracts)
    return CategoryTallyOutput(
        energy=run_tally(TallyInput(energy, rules.get_tracked_providers("energy"))),
        telephony=run_tally(TallyInput(telephony, rules.get_tracked_providers("telephony"))),
    )


def run(
    inp: TallyInput | CategoryTallyInput,
    *,
    rules: RulesPort | None = None,
) -> TallyOutput | CategoryTallyOutput:
    """
    Main entry point for the provider tally component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, TallyInput):
        return run_tally(inp)
    elif isinstance(inp, CategoryTallyInput):
        if rules is None:
            raise ValueError("RulesPort is required for category tallies")
        return run_category_tallies(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
