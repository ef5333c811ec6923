from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from clientdesk.components.commission import filter_and_sum
from clientdesk.components.directory import filter_by_provider
from clientdesk.components.expiring import select_expiring
from clientdesk.components.providers import TrackedProvider, tally
from clientdesk.components.search import SearchConfig, search
from clientdesk.components.trend import monthly_trend
from clientdesk.domain.entities import Client, Contract, ContractType

ROME = ZoneInfo("Europe/Rome")
REFERENCE = datetime(2024, 3, 20, 10, 30, tzinfo=ROME)


def _contract(cid, provider="Enel", start=None, end=None, commission=None):
    return Contract(
        id=cid,
        client_id="c1",
        type=ContractType.ELECTRICITY,
        provider=provider,
        start_date=start,
        end_date=end,
        commission=commission,
    )


# --- Search ---
def test_short_queries_match_nothing(clients, contracts):
    """Queries below the minimum length never return anything."""
    for query in ("", "a", "R", " "):
        result = search(query, clients, contracts, SearchConfig(min_query_length=2))
        assert result.clients == ()
        assert result.contracts == ()


def test_substring_of_field_finds_record(clients, contracts):
    """Any substring of a searchable field finds its record, in any case."""
    mario = clients[0]
    for field_value in (mario.email, mario.codice_fiscale, mario.ibans[0].value):
        needle = field_value[2:9]
        assert mario in search(needle.upper(), clients, contracts).clients
        assert mario in search(needle.lower(), clients, contracts).clients

    enel = contracts[0]
    assert enel in search("EN-00", clients, contracts).contracts


# --- Commission ---
def test_all_filters_cover_every_contract(contracts):
    """With every filter at "all", count and total describe the whole input."""
    summary = filter_and_sum(contracts)
    assert summary.count == len(contracts)
    assert summary.total == sum(c.commission or 0.0 for c in contracts)


def test_commission_example():
    contracts = [
        _contract("a", "Enel", date(2024, 3, 10), commission=100.0),
        _contract("b", "TIM", date(2024, 3, 15), commission=50.0),
    ]
    summary = filter_and_sum(contracts, 2024, 3, "all")
    assert summary.count == 2
    assert summary.total == 150.0


# --- Expiring ---
@pytest.mark.parametrize(
    ("offset", "included"),
    [(0, True), (30, True), (-1, False), (31, False)],
)
def test_expiring_boundaries(offset, included):
    today = REFERENCE.date()
    contract = _contract("k", end=today + timedelta(days=offset))
    assert bool(select_expiring([contract], REFERENCE)) is included


# --- Trend ---
def test_trend_has_six_buckets_and_counts_window():
    created = [
        datetime(2023, 9, 30, 12, tzinfo=ROME),
        datetime(2023, 10, 1, 0, 30, tzinfo=ROME),
        datetime(2024, 1, 31, tzinfo=ROME),
        datetime(2024, 3, 20, tzinfo=ROME),
        datetime(2024, 4, 1, tzinfo=ROME),
    ]
    clients = [Client(id=str(i), created_at=c) for i, c in enumerate(created)]
    trend = monthly_trend(clients, REFERENCE)
    assert len(trend.buckets) == 6
    in_window = [c for c in created if (2023, 10) <= (c.year, c.month) <= (2024, 3)]
    assert sum(b.count for b in trend.buckets) == len(in_window) == 3


# --- Provider Tally ---
def test_tally_over_nothing_is_all_zero():
    tracked = [TrackedProvider(n) for n in ("Enel", "Duferco", "Edison", "Lenergia", "A2A")]
    counts = tally([], tracked)
    assert [c.provider for c in counts] == [t.name for t in tracked]
    assert all(c.count == 0 for c in counts)


def test_filter_then_tally_agree(contracts, providers):
    """Filtering by a catalogue provider and tallying it give the same count."""
    for provider in providers:
        filtered = filter_by_provider(contracts, provider)
        counted = tally(contracts, [TrackedProvider(provider)])[0].count
        assert counted == len(filtered)
