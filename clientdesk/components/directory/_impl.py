"""
Directory - client and contract list helpers.

Functional Core - pure business logic.

Key behaviors:
- Contract list can be narrowed to one provider ("all" keeps everything)
- Clients sorted by last name, then first name, case-insensitively
- Dangling client references resolve to a fallback label
- Provider catalogue rejects blanks and case-insensitive duplicates
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from clientdesk.domain.entities import Client, Contract

from .models import DirectoryValidationError

# --- Configuration ---


@dataclass(frozen=True)
class DirectoryConfig:
    """Directory configuration."""

    unknown_client_label: str = "Sconosciuto"
    missing_client_label: str = "N/D"


DEFAULT_CONFIG = DirectoryConfig()


# --- Contracts ---


def filter_by_provider(contracts: Sequence[Contract], provider: str) -> list[Contract]:
    """Contracts whose provider equals the filter exactly."""
    if provider == "all":
        return list(contracts)
    return [c for c in contracts if c.provider == provider]


# --- Clients ---


def sort_clients(clients: Iterable[Client]) -> list[Client]:
    """New list ordered by last name, then first name."""
    return sorted(clients, key=lambda c: (c.last_name.casefold(), c.first_name.casefold()))


def index_clients(clients: Iterable[Client]) -> dict[str, Client]:
    """Map client id to client."""
    return {client.id: client for client in clients}


def client_display_name(
    client_id: str,
    clients: Iterable[Client] | dict[str, Client],
    fallback: str = DEFAULT_CONFIG.unknown_client_label,
) -> str:
    """'First Last' for the referenced client, or the fallback label."""
    by_id = clients if isinstance(clients, dict) else index_clients(clients)
    client = by_id.get(client_id)
    return client.full_name if client is not None else fallback


# --- Provider Catalogue ---


def validate_provider(
    providers: Sequence[str],
    candidate: str,
) -> list[DirectoryValidationError]:
    """Validate a new provider name against the catalogue."""
    name = candidate.strip()
    if not name:
        return [
            DirectoryValidationError(
                code="provider_required",
                message="Provider name is required",
                field="provider",
            )
        ]
    if any(p.lower() == name.lower() for p in providers):
        return [
            DirectoryValidationError(
                code="provider_duplicate",
                message=f"Provider '{name}' already exists",
                field="provider",
            )
        ]
    return []


def add_provider(providers: Sequence[str], candidate: str) -> list[str]:
    """Catalogue with the trimmed candidate appended, unchanged if invalid."""
    if validate_provider(providers, candidate):
        return list(providers)
    return [*providers, candidate.strip()]


def sorted_providers(providers: Iterable[str]) -> list[str]:
    """Catalogue ordered for pickers."""
    return sorted(providers)
