"""
Search component - Free-text search over clients and contracts.
"""

from ._impl import (
    CLIENT_SEARCH_FIELDS,
    CONTRACT_SEARCH_FIELDS,
    DEFAULT_CONFIG,
    SearchConfig,
    client_matches,
    client_search_text,
    contract_matches,
    search,
)
from .component import run, run_search
from .models import SearchInput, SearchOutput, SearchResult
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_search",
    # Models
    "SearchInput",
    "SearchOutput",
    "SearchResult",
    # Ports
    "RulesPort",
    # Functional core
    "CLIENT_SEARCH_FIELDS",
    "CONTRACT_SEARCH_FIELDS",
    "DEFAULT_CONFIG",
    "SearchConfig",
    "client_matches",
    "client_search_text",
    "contract_matches",
    "search",
]
