"""
Dashboard component - Composite snapshot of all dashboard widgets.
"""

from .component import run, run_dashboard
from .models import DashboardInput, DashboardOutput, ExpiringAlert
from .ports import RulesPort, TimePort

__all__ = [
    # Entry points
    "run",
    "run_dashboard",
    # Models
    "DashboardInput",
    "DashboardOutput",
    "ExpiringAlert",
    # Ports
    "RulesPort",
    "TimePort",
]
