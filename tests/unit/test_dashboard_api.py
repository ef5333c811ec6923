"""
Dashboard API endpoint tests.

Tests the HTTP layer over an in-memory snapshot with a frozen clock.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from clientdesk.adapters.clock import FrozenClock
from clientdesk.adapters.json_snapshot import InMemorySnapshotRepo, JsonSnapshotRepo
from clientdesk.api.deps import get_clock, get_rules, get_snapshot_repo
from clientdesk.api.main import app
from clientdesk.domain.entities import Client, Contract
from clientdesk.rules.models import Rules


@pytest.fixture
def client(
    rules: Rules,
    clock: FrozenClock,
    clients: list[Client],
    contracts: list[Contract],
    providers: list[str],
) -> Iterator[TestClient]:
    repo = InMemorySnapshotRepo(clients, contracts, providers)
    app.dependency_overrides[get_rules] = lambda: rules
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_snapshot_repo] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestDashboard:
    """GET /api/dashboard"""

    def test_default_filters(self, client: TestClient) -> None:
        response = client.get("/api/dashboard")
        assert response.status_code == 200
        data = response.json()

        assert data["totalClients"] == 3
        assert data["commission"]["count"] == 4
        assert data["commission"]["total"] == 180.0
        assert data["commission"]["period"] == "Complessivo"
        assert data["commission"]["contracts"] == []

        assert data["expiring"]["today"] == "2024-03-20"
        assert data["expiring"]["horizon"] == "2024-04-19"
        assert [i["contract"]["id"] for i in data["expiring"]["items"]] == ["k1", "k3"]

        assert [b["label"] for b in data["trend"]["buckets"]] == [
            "Ott", "Nov", "Dic", "Gen", "Feb", "Mar",
        ]
        assert data["trend"]["total"] == 2

        energy = {c["provider"]: c["count"] for c in data["providersTally"]["energy"]["counts"]}
        assert energy == {"Enel": 1, "Duferco": 0, "Edison": 1, "Lenergia": 0, "A2A": 0}
        telephony = data["providersTally"]["telephony"]["counts"]
        assert [(c["label"], c["count"]) for c in telephony] == [
            ("TIM", 1), ("Vodafone", 0), ("WindTre", 0), ("Enel Fibra", 1),
        ]

        assert data["availableYears"][0] == 2023
        assert data["availableYears"][-1] == 2050
        assert data["providers"] == ["Edison", "Enel", "TIM", "Vodafone"]

    def test_filtered(self, client: TestClient) -> None:
        response = client.get("/api/dashboard", params={"year": "2024", "month": "3"})
        assert response.status_code == 200
        commission = response.json()["commission"]
        assert commission["count"] == 2
        assert commission["total"] == 150.0
        assert commission["period"] == "Marzo 2024"

    def test_invalid_filter(self, client: TestClient) -> None:
        response = client.get("/api/dashboard", params={"month": "13"})
        assert response.status_code == 400
        assert response.json()["detail"][0]["code"] == "filter_out_of_range"


class TestSearch:
    """GET /api/search"""

    def test_contract_hit_with_client_name(self, client: TestClient) -> None:
        data = client.get("/api/search", params={"q": "tim"}).json()
        assert data["clients"] == []
        assert [h["contract"]["id"] for h in data["contracts"]] == ["k2"]
        assert data["contracts"][0]["clientName"] == "Anna Bianchi"

    def test_dangling_client_reference(self, client: TestClient) -> None:
        data = client.get("/api/search", params={"q": "enel"}).json()
        names = {h["contract"]["id"]: h["clientName"] for h in data["contracts"]}
        assert names == {"k1": "Mario Rossi", "k4": "Sconosciuto"}

    def test_client_hit_uses_camel_case(self, client: TestClient) -> None:
        data = client.get("/api/search", params={"q": "torino"}).json()
        assert [c["lastName"] for c in data["clients"]] == ["Bianchi"]

    def test_short_query(self, client: TestClient) -> None:
        data = client.get("/api/search", params={"q": "r"}).json()
        assert data["queryTooShort"] is True
        assert data["clients"] == []
        assert data["contracts"] == []


class TestCommission:
    """GET /api/commission"""

    def test_provider_filter(self, client: TestClient) -> None:
        data = client.get("/api/commission", params={"provider": "Enel"}).json()
        assert data["count"] == 2
        assert data["total"] == 100.0
        assert [c["id"] for c in data["contracts"]] == ["k1", "k4"]

    def test_non_numeric_year(self, client: TestClient) -> None:
        response = client.get("/api/commission", params={"year": "last"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail[0]["field"] == "year"
        assert detail[0]["code"] == "filter_not_numeric"

    @pytest.mark.parametrize("raw", ["--2024", "--5", "²"])
    def test_malformed_number_is_bad_request(self, client: TestClient, raw: str) -> None:
        for path in ("/api/commission", "/api/dashboard"):
            response = client.get(path, params={"year": raw})
            assert response.status_code == 400
            assert response.json()["detail"][0]["code"] == "filter_not_numeric"


class TestWireShape:
    """Envelopes and nested records share one casing."""

    def test_envelope_keys_are_camel_case(self, client: TestClient) -> None:
        data = client.get("/api/dashboard").json()
        assert {"totalClients", "providersTally", "availableYears"} <= data.keys()
        item = data["expiring"]["items"][0]
        assert set(item) == {"contract", "clientName"}
        assert "clientId" in item["contract"]
        assert "maxCount" in data["trend"]
        assert "colorKey" in data["providersTally"]["energy"]["counts"][0]


class TestContracts:
    """GET /api/contracts and /api/contracts/expiring"""

    def test_list_all(self, client: TestClient) -> None:
        data = client.get("/api/contracts").json()
        assert data["total"] == 4

    def test_list_by_provider(self, client: TestClient) -> None:
        data = client.get("/api/contracts", params={"provider": "Enel"}).json()
        assert [(i["contract"]["id"], i["clientName"]) for i in data["items"]] == [
            ("k1", "Mario Rossi"),
            ("k4", "N/D"),
        ]
        assert data["items"][0]["contract"]["clientId"] == "c1"

    def test_expiring(self, client: TestClient) -> None:
        data = client.get("/api/contracts/expiring").json()
        assert data["total"] == 2
        assert data["items"][1]["contract"]["endDate"] == "2024-03-20"


class TestClients:
    """GET /api/clients and /api/clients/trend"""

    def test_sorted(self, client: TestClient) -> None:
        data = client.get("/api/clients").json()
        assert [c["lastName"] for c in data["items"]] == ["Bianchi", "Rossi", "Verdi"]

    def test_trend(self, client: TestClient) -> None:
        data = client.get("/api/clients/trend").json()
        assert len(data["buckets"]) == 6
        assert data["buckets"][-1]["key"] == "2024-03"
        assert data["maxCount"] == 1


def test_provider_tally(client: TestClient) -> None:
    data = client.get("/api/providers/tally").json()
    assert data["energy"]["totalContracts"] == 2
    assert data["telephony"]["totalContracts"] == 2


def test_missing_snapshot_is_unavailable(client: TestClient, tmp_path: Path) -> None:
    app.dependency_overrides[get_snapshot_repo] = lambda: JsonSnapshotRepo(
        tmp_path / "missing.json"
    )
    response = client.get("/api/contracts")
    assert response.status_code == 503
