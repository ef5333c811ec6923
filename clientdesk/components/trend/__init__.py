"""
Client trend component - Monthly new-client buckets.
"""

from ._impl import (
    DEFAULT_CONFIG,
    TrendConfig,
    monthly_trend,
    shift_month,
    trailing_months,
)
from .component import run, run_trend
from .models import MonthBucket, MonthlyTrend, TrendInput, TrendOutput
from .ports import RulesPort, TimePort

__all__ = [
    # Entry points
    "run",
    "run_trend",
    # Models
    "MonthBucket",
    "MonthlyTrend",
    "TrendInput",
    "TrendOutput",
    # Ports
    "RulesPort",
    "TimePort",
    # Functional core
    "DEFAULT_CONFIG",
    "TrendConfig",
    "monthly_trend",
    "shift_month",
    "trailing_months",
]
