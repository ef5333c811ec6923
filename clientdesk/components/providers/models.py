"""
Provider tally component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from clientdesk.domain.entities import Contract

Category = Literal["energy", "telephony"]


@dataclass(frozen=True)
class TrackedProvider:
    """A provider enumerated for a tally widget."""

    name: str
    label: str | None = None
    color_key: str | None = None

    @property
    def display_label(self) -> str:
        return self.label or self.name


# --- Input Models ---


@dataclass(frozen=True)
class TallyInput:
    """Input for tallying an already-filtered set of contracts."""

    contracts: Sequence[Contract]
    tracked: Sequence[TrackedProvider]


@dataclass(frozen=True)
class CategoryTallyInput:
    """Input for tallying every category with its configured providers."""

    contracts: Sequence[Contract]


# --- Output Models ---


@dataclass(frozen=True)
class ProviderCount:
    """Contracts counted for one tracked provider."""

    provider: str
    count: int
    label: str
    color_key: str | None = None


@dataclass(frozen=True)
class TallyOutput:
    """Output for a single tally."""

    counts: tuple[ProviderCount, ...]
    total_contracts: int


@dataclass(frozen=True)
class CategoryTallyOutput:
    """Output for the energy/gas and telephony tallies."""

    energy: TallyOutput
    telephony: TallyOutput
