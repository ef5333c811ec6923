"""
Search component - Global client/contract search.

Invariants:
- I1: Queries below the minimum length never scan
- I2: Matching is case-insensitive substring matching
- I3: Results keep input order
"""

from __future__ import annotations

from ._impl import SearchConfig, search
from .models import SearchInput, SearchOutput
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> SearchConfig:
    """Build search config from rules port."""
    if rules is None:
        return SearchConfig()
    return SearchConfig(min_query_length=rules.get_min_query_length())


# --- Component Entry Points ---


def run_search(inp: SearchInput, *, rules: RulesPort | None = None) -> SearchOutput:
    """
    Search clients and contracts.

    Args:
        inp: Query plus the snapshot to scan.
        rules: Optional rules port for configuration.

    Returns:
        SearchOutput with matched clients and contracts.
    """
    config = _build_config(rules)
    result = search(inp.query, inp.clients, inp.contracts, config)
    return SearchOutput(
        result=result,
        query_too_short=len(inp.query) < config.min_query_length,
    )


def run(inp: SearchInput, *, rules: RulesPort | None = None) -> SearchOutput:
    """Main entry point for the search component."""
    if isinstance(inp, SearchInput):
        return run_search(inp, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
