"""
Provider tally component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import Category, TrackedProvider


class RulesPort(Protocol):
    """Port for tracked-provider configuration."""

    def get_tracked_providers(self, category: Category) -> list[TrackedProvider]:
        """Get the tracked providers for a contract category, in display order."""
        ...
