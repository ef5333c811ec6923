"""
Provider tally component - Contract counts per tracked provider.
"""

from ._impl import partition_by_category, tally
from .component import run, run_category_tallies, run_tally
from .models import (
    Category,
    CategoryTallyInput,
    CategoryTallyOutput,
    ProviderCount,
    TallyInput,
    TallyOutput,
    TrackedProvider,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_category_tallies",
    "run_tally",
    # Input models
    "CategoryTallyInput",
    "TallyInput",
    # Output models
    "Category",
    "CategoryTallyOutput",
    "ProviderCount",
    "TallyOutput",
    "TrackedProvider",
    # Ports
    "RulesPort",
    # Functional core
    "partition_by_category",
    "tally",
]
