"""
Search component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for search rules configuration."""

    def get_min_query_length(self) -> int:
        """Get the shortest query that triggers a scan."""
        ...
