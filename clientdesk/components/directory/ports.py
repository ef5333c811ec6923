"""
Directory component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for directory rules configuration."""

    def get_unknown_client_label(self) -> str:
        """Get the label shown in search results for a dangling client reference."""
        ...

    def get_missing_client_label(self) -> str:
        """Get the label shown in contract lists for a dangling client reference."""
        ...
