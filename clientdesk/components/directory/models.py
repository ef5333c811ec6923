"""
Directory component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from clientdesk.domain.entities import Client, Contract

# --- Validation Error ---


@dataclass(frozen=True)
class DirectoryValidationError:
    """Directory validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ContractListInput:
    """Input for the contract list view."""

    contracts: Sequence[Contract]
    clients: Sequence[Client]
    provider: str = "all"


@dataclass(frozen=True)
class ClientListInput:
    """Input for the client list view."""

    clients: Sequence[Client]


@dataclass(frozen=True)
class AddProviderInput:
    """Input for adding a provider to the catalogue."""

    providers: Sequence[str]
    candidate: str


# --- Output Models ---


@dataclass(frozen=True)
class ContractRow:
    """A contract paired with its resolved client name."""

    contract: Contract
    client_name: str


@dataclass(frozen=True)
class ContractListOutput:
    """Output for the contract list view."""

    rows: tuple[ContractRow, ...]
    total: int


@dataclass(frozen=True)
class ClientListOutput:
    """Output for the client list view."""

    clients: tuple[Client, ...]
    total: int


@dataclass(frozen=True)
class ProviderCatalogOutput:
    """Output for provider catalogue changes."""

    providers: tuple[str, ...]
    added: str | None = None
    errors: list[DirectoryValidationError] = field(default_factory=list)
    success: bool = True
