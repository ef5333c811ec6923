"""
SearchIndex - free-text search over clients and contracts.

Functional Core - pure business logic.

Key behaviors:
- Queries shorter than the configured minimum return nothing
- Case-insensitive substring matching
- Client fields are concatenated and matched as one string
- Contract fields are matched independently (any field may match)
- Result order follows the input collections
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from clientdesk.core.services.address import format_address_for_search
from clientdesk.domain.entities import Client, Contract

from .models import SearchResult

# --- Configuration ---


@dataclass(frozen=True)
class SearchConfig:
    """Search configuration."""

    min_query_length: int = 2


DEFAULT_CONFIG = SearchConfig()


# --- Field Extractors ---

FieldExtractor = Callable[[Client], str | None]
ContractFieldExtractor = Callable[[Contract], str | None]


def _client_ibans(client: Client) -> str:
    return " ".join(iban.value for iban in client.ibans)


CLIENT_SEARCH_FIELDS: tuple[tuple[str, FieldExtractor], ...] = (
    ("first_name", lambda c: c.first_name),
    ("last_name", lambda c: c.last_name),
    ("email", lambda c: c.email),
    ("codice_fiscale", lambda c: c.codice_fiscale),
    ("mobile_phone", lambda c: c.mobile_phone),
    ("ibans", _client_ibans),
    ("legal_address", lambda c: format_address_for_search(c.legal_address)),
    ("residential_address", lambda c: format_address_for_search(c.residential_address)),
)

CONTRACT_SEARCH_FIELDS: tuple[tuple[str, ContractFieldExtractor], ...] = (
    ("provider", lambda c: c.provider),
    ("contract_code", lambda c: c.contract_code),
    ("supply_address", lambda c: format_address_for_search(c.supply_address)),
)


def client_search_text(client: Client) -> str:
    """Lowercased space-joined text of every non-empty client field."""
    values = (extract(client) for _, extract in CLIENT_SEARCH_FIELDS)
    return " ".join(v for v in values if v).lower()


def client_matches(client: Client, needle: str) -> bool:
    """Check a lowercased needle against the client's search text."""
    return needle in client_search_text(client)


def contract_matches(contract: Contract, needle: str) -> bool:
    """Check a lowercased needle against each contract field in turn."""
    for _, extract in CONTRACT_SEARCH_FIELDS:
        value = extract(contract)
        if value and needle in value.lower():
            return True
    return False


# --- Search ---


def search(
    query: str,
    clients: Sequence[Client],
    contracts: Sequence[Contract],
    config: SearchConfig = DEFAULT_CONFIG,
) -> SearchResult:
    """
    Scan both collections for a free-text query.

    The query is not trimmed; its raw length decides whether to scan.
    """
    if len(query) < config.min_query_length:
        return SearchResult()

    needle = query.lower()
    return SearchResult(
        clients=tuple(c for c in clients if client_matches(c, needle)),
        contracts=tuple(c for c in contracts if contract_matches(c, needle)),
    )
