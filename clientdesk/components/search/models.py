"""
Search component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from clientdesk.domain.entities import Client, Contract

# --- Input Models ---


@dataclass(frozen=True)
class SearchInput:
    """Input for a free-text search over a snapshot."""

    query: str
    clients: Sequence[Client]
    contracts: Sequence[Contract]


# --- Output Models ---


@dataclass(frozen=True)
class SearchResult:
    """Matched subsets, in original collection order."""

    clients: tuple[Client, ...] = ()
    contracts: tuple[Contract, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.clients and not self.contracts


@dataclass(frozen=True)
class SearchOutput:
    """Output for a search."""

    result: SearchResult
    query_too_short: bool = False
