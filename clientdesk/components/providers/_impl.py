"""
ProviderTally - contract counts per tracked provider.

Functional Core - pure business logic.

Key behaviors:
- Case-insensitive exact match on the provider name (no substrings)
- One entry per tracked provider, in configured order, zeros included
- Category-agnostic; callers partition contracts first
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from clientdesk.domain.entities import Contract, ContractType

from .models import ProviderCount, TrackedProvider


def partition_by_category(
    contracts: Iterable[Contract],
) -> tuple[list[Contract], list[Contract]]:
    """Split contracts into (energy and gas, telephony), keeping order."""
    energy: list[Contract] = []
    telephony: list[Contract] = []
    for contract in contracts:
        if contract.is_energy:
            energy.append(contract)
        elif contract.type == ContractType.TELEPHONY:
            telephony.append(contract)
    return energy, telephony


def tally(
    contracts: Iterable[Contract],
    tracked: Sequence[TrackedProvider],
) -> list[ProviderCount]:
    """Count contracts per tracked provider."""
    counts = Counter(contract.provider.lower() for contract in contracts)
    return [
        ProviderCount(
            provider=provider.name,
            count=counts[provider.name.lower()],
            label=provider.display_label,
            color_key=provider.color_key,
        )
        for provider in tracked
    ]
