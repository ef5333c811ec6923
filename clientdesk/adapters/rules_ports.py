"""
Adapter mapping the validated Rules model onto the component RulesPorts.

One class satisfies every component's RulesPort structurally, so the shells
can hand the same object to any entry point.
"""

from __future__ import annotations

from clientdesk.components.providers import Category, TrackedProvider
from clientdesk.rules.models import Rules


class RulesAdapter:
    """Adapter to map generic Rules to the component RulesPorts."""

    def __init__(self, rules: Rules) -> None:
        self._rules = rules

    @property
    def rules(self) -> Rules:
        return self._rules

    # search
    def get_min_query_length(self) -> int:
        return self._rules.search.min_query_length

    # commission
    def get_year_range(self) -> tuple[int, int]:
        return self._rules.commission.first_year, self._rules.commission.last_year

    def get_month_names(self) -> list[str]:
        return list(self._rules.locale.month_names)

    # expiring
    def get_expiring_window_days(self) -> int:
        return self._rules.expiring.window_days

    # trend
    def get_trend_months(self) -> int:
        return self._rules.trend.months

    def get_month_abbreviations(self) -> list[str]:
        return list(self._rules.locale.month_abbreviations)

    # providers
    def get_tracked_providers(self, category: Category) -> list[TrackedProvider]:
        if category == "energy":
            configured = self._rules.providers.energy
        elif category == "telephony":
            configured = self._rules.providers.telephony
        else:
            raise ValueError(f"Unknown contract category: {category}")
        return [
            TrackedProvider(name=p.name, label=p.label, color_key=p.color_key)
            for p in configured
        ]

    # directory
    def get_unknown_client_label(self) -> str:
        return self._rules.directory.unknown_client_label

    def get_missing_client_label(self) -> str:
        return self._rules.directory.missing_client_label
