"""
Snapshot repository interface.

The persistence collaborator owns create/update/delete. The engine only
reads point-in-time collections through this port.
"""

from __future__ import annotations

from typing import Protocol

from clientdesk.domain.entities import Client, Contract


class SnapshotRepoPort(Protocol):
    """Read-only access to the current client/contract snapshot."""

    def list_clients(self) -> list[Client]:
        """List all clients."""
        ...

    def list_contracts(self) -> list[Contract]:
        """List all contracts."""
        ...

    def list_providers(self) -> list[str]:
        """List the provider catalogue."""
        ...
