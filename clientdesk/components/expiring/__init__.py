"""
Expiring contracts component - Contracts ending within the alert window.
"""

from ._impl import DEFAULT_CONFIG, ExpiringConfig, expiry_window, select_expiring
from .component import run, run_expiring
from .models import ExpiringInput, ExpiringOutput, ExpiryWindow
from .ports import RulesPort, TimePort

__all__ = [
    # Entry points
    "run",
    "run_expiring",
    # Models
    "ExpiringInput",
    "ExpiringOutput",
    "ExpiryWindow",
    # Ports
    "RulesPort",
    "TimePort",
    # Functional core
    "DEFAULT_CONFIG",
    "ExpiringConfig",
    "expiry_window",
    "select_expiring",
]
