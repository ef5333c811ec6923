"""
Expiring contracts component unit tests.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from clientdesk.components.expiring import (
    ExpiringConfig,
    ExpiringInput,
    expiry_window,
    run,
    run_expiring,
    select_expiring,
)
from clientdesk.domain.entities import Contract, ContractType

ROME = ZoneInfo("Europe/Rome")

# --- Mock Implementations ---


class MockTimePort:
    """Mock time port for deterministic testing."""

    def __init__(self, fixed_time: datetime | None = None) -> None:
        self._time = fixed_time or datetime(2024, 6, 15, 18, 45, tzinfo=ROME)

    def now_local(self) -> datetime:
        return self._time

    @property
    def timezone_name(self) -> str:
        return "Europe/Rome"


class MockRulesPort:
    def __init__(self, window_days: int = 30) -> None:
        self._days = window_days

    def get_expiring_window_days(self) -> int:
        return self._days


def _ending(cid: str, end: date | None) -> Contract:
    return Contract(
        id=cid, client_id="c1", type=ContractType.GAS, provider="Edison", end_date=end
    )


# --- Fixtures ---


@pytest.fixture
def reference() -> datetime:
    return datetime(2024, 6, 15, 18, 45, tzinfo=ROME)


@pytest.fixture
def today(reference: datetime) -> date:
    return reference.date()


# --- Window ---


class TestExpiryWindow:
    """Tests for the inclusive calendar-day window."""

    def test_window_ignores_time_of_day(self, reference: datetime, today: date) -> None:
        window = expiry_window(reference)
        assert window.today == today
        assert window.horizon == today + timedelta(days=30)

    def test_custom_window(self, reference: datetime, today: date) -> None:
        window = expiry_window(reference, ExpiringConfig(window_days=7))
        assert window.horizon == date(2024, 6, 22)

    def test_window_crosses_year_end(self) -> None:
        window = expiry_window(datetime(2024, 12, 20, tzinfo=ROME))
        assert window.horizon == date(2025, 1, 19)


# --- Selection ---


class TestSelectExpiring:
    """Tests for select_expiring boundaries."""

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [(-1, False), (0, True), (1, True), (29, True), (30, True), (31, False)],
    )
    def test_boundaries(
        self, reference: datetime, today: date, offset: int, expected: bool
    ) -> None:
        contract = _ending("k", today + timedelta(days=offset))
        assert (select_expiring([contract], reference) == [contract]) is expected

    def test_open_ended_never_expires(self, reference: datetime) -> None:
        assert select_expiring([_ending("k", None)], reference) == []

    def test_keeps_input_order(self, reference: datetime, today: date) -> None:
        later = _ending("later", today + timedelta(days=20))
        sooner = _ending("sooner", today + timedelta(days=2))
        expired = _ending("expired", today - timedelta(days=3))
        assert select_expiring([later, expired, sooner], reference) == [later, sooner]

    def test_zero_day_window_is_today_only(self, reference: datetime, today: date) -> None:
        config = ExpiringConfig(window_days=0)
        assert len(select_expiring([_ending("k", today)], reference, config)) == 1
        assert select_expiring([_ending("k", today + timedelta(days=1))], reference, config) == []


# --- Entry Points ---


class TestRunExpiring:
    """Tests for run_expiring."""

    def test_uses_explicit_reference(self, reference: datetime, today: date) -> None:
        out = run_expiring(ExpiringInput([_ending("k", today)], reference))
        assert out.count == 1
        assert out.window.today == today

    def test_falls_back_to_time_port(self, today: date) -> None:
        out = run_expiring(
            ExpiringInput([_ending("k", today + timedelta(days=30))]),
            time_port=MockTimePort(),
        )
        assert out.count == 1

    def test_rules_window(self, reference: datetime, today: date) -> None:
        out = run_expiring(
            ExpiringInput([_ending("k", today + timedelta(days=10))], reference),
            rules=MockRulesPort(5),
        )
        assert out.count == 0
        assert out.window.horizon == today + timedelta(days=5)

    def test_requires_time_source(self) -> None:
        with pytest.raises(ValueError, match="TimePort is required"):
            run_expiring(ExpiringInput([]))

    def test_run_dispatches(self, reference: datetime) -> None:
        assert run(ExpiringInput([], reference)).count == 0

    def test_run_rejects_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run([])  # type: ignore[arg-type]
