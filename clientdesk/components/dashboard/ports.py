"""
Dashboard component port definitions.

The dashboard composes every engine component, so its rules port is the
union of theirs.
"""

from __future__ import annotations

from typing import Protocol

from clientdesk.components.commission import RulesPort as CommissionRulesPort
from clientdesk.components.directory import RulesPort as DirectoryRulesPort
from clientdesk.components.expiring import RulesPort as ExpiringRulesPort
from clientdesk.components.expiring import TimePort as TimePort
from clientdesk.components.providers import RulesPort as ProvidersRulesPort
from clientdesk.components.search import RulesPort as SearchRulesPort
from clientdesk.components.trend import RulesPort as TrendRulesPort


class RulesPort(
    SearchRulesPort,
    CommissionRulesPort,
    ExpiringRulesPort,
    TrendRulesPort,
    ProvidersRulesPort,
    DirectoryRulesPort,
    Protocol,
):
    """Port for the full dashboard rules configuration."""


__all__ = ["RulesPort", "TimePort"]
