"""
Commission component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for commission rules configuration."""

    def get_year_range(self) -> tuple[int, int]:
        """Get the (first, last) years always offered by the year picker."""
        ...

    def get_month_names(self) -> list[str]:
        """Get the twelve full month names, January first."""
        ...
