"""
Commission component - Commission totals by year, month and provider.
"""

from ._impl import (
    ALL,
    DEFAULT_CONFIG,
    CommissionConfig,
    FilterParseError,
    available_years,
    commission_period,
    contract_qualifies,
    filter_and_sum,
    parse_filter_value,
)
from .component import run, run_available_years, run_commission
from .models import (
    AvailableYearsInput,
    AvailableYearsOutput,
    CommissionInput,
    CommissionOutput,
    CommissionSummary,
    CommissionValidationError,
    MonthFilter,
    ProviderFilter,
    YearFilter,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_available_years",
    "run_commission",
    # Input models
    "AvailableYearsInput",
    "CommissionInput",
    # Output models
    "AvailableYearsOutput",
    "CommissionOutput",
    "CommissionSummary",
    "CommissionValidationError",
    "MonthFilter",
    "ProviderFilter",
    "YearFilter",
    # Ports
    "RulesPort",
    # Functional core
    "ALL",
    "DEFAULT_CONFIG",
    "CommissionConfig",
    "FilterParseError",
    "available_years",
    "commission_period",
    "contract_qualifies",
    "filter_and_sum",
    "parse_filter_value",
]
