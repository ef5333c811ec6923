"""
Rules adapter tests.
"""

from __future__ import annotations

import pytest

from clientdesk.adapters.rules_ports import RulesAdapter
from clientdesk.components.providers import TrackedProvider


class TestRulesAdapter:
    """RulesAdapter exposes rules.yaml through every component port."""

    def test_scalar_settings(self, rules_adapter: RulesAdapter) -> None:
        assert rules_adapter.get_min_query_length() == 2
        assert rules_adapter.get_expiring_window_days() == 30
        assert rules_adapter.get_trend_months() == 6
        assert rules_adapter.get_year_range() == (2023, 2050)

    def test_locale_lists(self, rules_adapter: RulesAdapter) -> None:
        assert rules_adapter.get_month_abbreviations()[2] == "Mar"
        assert rules_adapter.get_month_names()[2] == "Marzo"

    def test_directory_labels(self, rules_adapter: RulesAdapter) -> None:
        assert rules_adapter.get_unknown_client_label() == "Sconosciuto"
        assert rules_adapter.get_missing_client_label() == "N/D"

    def test_tracked_providers(self, rules_adapter: RulesAdapter) -> None:
        telephony = rules_adapter.get_tracked_providers("telephony")
        assert telephony[-1] == TrackedProvider("Enel", label="Enel Fibra", color_key="Enel")
        assert telephony[-1].display_label == "Enel Fibra"
        assert rules_adapter.get_tracked_providers("energy")[0].display_label == "Enel"

    def test_unknown_category(self, rules_adapter: RulesAdapter) -> None:
        with pytest.raises(ValueError, match="Unknown contract category"):
            rules_adapter.get_tracked_providers("water")  # type: ignore[arg-type]
