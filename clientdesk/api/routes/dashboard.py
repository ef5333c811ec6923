"""Read-only dashboard routes over the current snapshot."""

import logging
from dataclasses import dataclass

from fastapi import APIRouter, Depends, HTTPException, Query

from clientdesk.adapters.rules_ports import RulesAdapter
from clientdesk.api.deps import get_clock, get_rules_adapter, get_snapshot_repo
from clientdesk.api.schemas import (
    ClientListResponse,
    CommissionResponse,
    ContractHit,
    ContractListResponse,
    DashboardResponse,
    ExpiringResponse,
    ProviderTallyResponse,
    SearchResponse,
    TrendResponse,
    commission_response,
    contract_hits,
    dashboard_response,
    expiring_response,
    tally_response,
    trend_response,
    validation_errors,
)
from clientdesk.components.commission import CommissionInput, CommissionOutput, run_commission
from clientdesk.components.dashboard import DashboardInput, run_dashboard
from clientdesk.components.directory import (
    ClientListInput,
    ContractListInput,
    run_client_list,
    run_contract_list,
)
from clientdesk.components.expiring import ExpiringInput, run_expiring
from clientdesk.components.providers import CategoryTallyInput, run_category_tallies
from clientdesk.components.search import SearchInput, run_search
from clientdesk.components.trend import TrendInput, run_trend
from clientdesk.core.ports import SnapshotRepoPort, TimePort
from clientdesk.domain.entities import Client, Contract

logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass(frozen=True)
class _Snapshot:
    clients: list[Client]
    contracts: list[Contract]
    providers: list[str]


def _load_snapshot(repo: SnapshotRepoPort) -> _Snapshot:
    try:
        return _Snapshot(
            clients=repo.list_clients(),
            contracts=repo.list_contracts(),
            providers=repo.list_providers(),
        )
    except (FileNotFoundError, ValueError) as e:
        logger.error("Snapshot unavailable: %s", e)
        raise HTTPException(status_code=503, detail="Snapshot unavailable") from e


def _require_valid(result: CommissionOutput) -> None:
    if not result.success:
        raise HTTPException(status_code=400, detail=validation_errors(result))


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    year: str = Query("all"),
    month: str = Query("all"),
    provider: str = Query("all"),
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
    rules: RulesAdapter = Depends(get_rules_adapter),
    clock: TimePort = Depends(get_clock),
) -> DashboardResponse:
    """Every dashboard widget for the selected filters."""
    snapshot = _load_snapshot(repo)
    result = run_dashboard(
        DashboardInput(
            clients=snapshot.clients,
            contracts=snapshot.contracts,
            providers=snapshot.providers,
            year=year,
            month=month,
            provider=provider,
        ),
        rules=rules,
        time_port=clock,
    )
    _require_valid(result.commission)
    return dashboard_response(result)


@router.get("/search", response_model=SearchResponse)
def search(
    q: str = Query(""),
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> SearchResponse:
    """Global search over clients and contracts."""
    snapshot = _load_snapshot(repo)
    result = run_search(SearchInput(q, snapshot.clients, snapshot.contracts), rules=rules)
    return SearchResponse(
        query=q,
        query_too_short=result.query_too_short,
        clients=list(result.result.clients),
        contracts=contract_hits(
            result.result.contracts, snapshot.clients, rules.get_unknown_client_label()
        ),
    )


@router.get("/commission", response_model=CommissionResponse)
def get_commission(
    year: str = Query("all"),
    month: str = Query("all"),
    provider: str = Query("all"),
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> CommissionResponse:
    """Commission total and count for the selected filters."""
    snapshot = _load_snapshot(repo)
    result = run_commission(
        CommissionInput(snapshot.contracts, year=year, month=month, provider=provider),
        rules=rules,
    )
    _require_valid(result)
    return commission_response(result)


@router.get("/contracts", response_model=ContractListResponse)
def list_contracts(
    provider: str = Query("all"),
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> ContractListResponse:
    """Contract list, optionally narrowed to one provider."""
    snapshot = _load_snapshot(repo)
    result = run_contract_list(
        ContractListInput(snapshot.contracts, snapshot.clients, provider), rules=rules
    )
    return ContractListResponse(
        items=[ContractHit(contract=r.contract, client_name=r.client_name) for r in result.rows],
        total=result.total,
    )


@router.get("/contracts/expiring", response_model=ExpiringResponse)
def list_expiring_contracts(
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
    rules: RulesAdapter = Depends(get_rules_adapter),
    clock: TimePort = Depends(get_clock),
) -> ExpiringResponse:
    """Contracts ending within the alert window."""
    snapshot = _load_snapshot(repo)
    result = run_expiring(ExpiringInput(snapshot.contracts), time_port=clock, rules=rules)
    return expiring_response(result, snapshot.clients, rules.get_unknown_client_label())


@router.get("/clients", response_model=ClientListResponse)
def list_clients(
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
) -> ClientListResponse:
    """Clients sorted by name."""
    snapshot = _load_snapshot(repo)
    result = run_client_list(ClientListInput(snapshot.clients))
    return ClientListResponse(items=list(result.clients), total=result.total)


@router.get("/clients/trend", response_model=TrendResponse)
def get_client_trend(
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
    rules: RulesAdapter = Depends(get_rules_adapter),
    clock: TimePort = Depends(get_clock),
) -> TrendResponse:
    """New clients per month over the trailing window."""
    snapshot = _load_snapshot(repo)
    result = run_trend(TrendInput(snapshot.clients), time_port=clock, rules=rules)
    return trend_response(result.trend)


@router.get("/providers/tally", response_model=ProviderTallyResponse)
def get_provider_tally(
    repo: SnapshotRepoPort = Depends(get_snapshot_repo),
    rules: RulesAdapter = Depends(get_rules_adapter),
) -> ProviderTallyResponse:
    """Energy/gas and telephony contract counts per tracked provider."""
    snapshot = _load_snapshot(repo)
    tallies = run_category_tallies(CategoryTallyInput(snapshot.contracts), rules=rules)
    return tally_response(tallies.energy, tallies.telephony)
