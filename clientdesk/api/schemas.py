from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from clientdesk.components.commission import CommissionOutput
from clientdesk.components.dashboard import DashboardOutput
from clientdesk.components.directory import client_display_name, index_clients
from clientdesk.components.expiring import ExpiringOutput
from clientdesk.components.providers import TallyOutput
from clientdesk.components.trend import MonthlyTrend
from clientdesk.domain.entities import Client, Contract


class _WireModel(BaseModel):
    # Same camelCase wire shape as the nested Client/Contract records.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Errors ---
class ValidationErrorModel(_WireModel):
    code: str
    message: str
    field: str | None = None


# --- Search ---
class ContractHit(_WireModel):
    contract: Contract
    client_name: str


class SearchResponse(_WireModel):
    query: str
    query_too_short: bool
    clients: list[Client]
    contracts: list[ContractHit]


# --- Commission ---
class CommissionResponse(_WireModel):
    year: int | str
    month: int | str
    provider: str
    period: str
    total: float
    count: int
    contracts: list[Contract] = []


# --- Contracts ---
class ContractListResponse(_WireModel):
    items: list[ContractHit]
    total: int


class ExpiringResponse(_WireModel):
    today: date
    horizon: date
    items: list[ContractHit]
    total: int


# --- Clients ---
class ClientListResponse(_WireModel):
    items: list[Client]
    total: int


class MonthBucketModel(_WireModel):
    key: str
    year: int
    month: int
    label: str
    count: int


class TrendResponse(_WireModel):
    buckets: list[MonthBucketModel]
    max_count: int
    total: int


# --- Providers ---
class ProviderCountModel(_WireModel):
    provider: str
    label: str
    count: int
    color_key: str | None = None


class ProviderTallyModel(_WireModel):
    counts: list[ProviderCountModel]
    total_contracts: int


class ProviderTallyResponse(_WireModel):
    energy: ProviderTallyModel
    telephony: ProviderTallyModel


# --- Dashboard ---
class DashboardResponse(_WireModel):
    reference: datetime
    total_clients: int
    commission: CommissionResponse
    expiring: ExpiringResponse
    trend: TrendResponse
    providers_tally: ProviderTallyResponse
    available_years: list[int]
    providers: list[str]


# --- Converters (component outputs -> response models) ---
def contract_hits(
    contracts: Iterable[Contract], clients: Iterable[Client], fallback: str
) -> list[ContractHit]:
    by_id = index_clients(clients)
    return [
        ContractHit(
            contract=contract,
            client_name=client_display_name(contract.client_id, by_id, fallback),
        )
        for contract in contracts
    ]


def validation_errors(result: CommissionOutput) -> list[dict[str, Any]]:
    return [
        ValidationErrorModel(code=e.code, message=e.message, field=e.field).model_dump(by_alias=True)
        for e in result.errors
    ]


def commission_response(
    result: CommissionOutput, include_contracts: bool = True
) -> CommissionResponse:
    """Convert a successful commission output; callers check ``success`` first."""
    if result.summary is None:
        raise ValueError("Commission output carries no summary")
    return CommissionResponse(
        year=result.year,
        month=result.month,
        provider=result.provider,
        period=result.period,
        total=result.summary.total,
        count=result.summary.count,
        contracts=list(result.summary.filtered) if include_contracts else [],
    )


def expiring_response(
    result: ExpiringOutput, clients: Iterable[Client], fallback: str
) -> ExpiringResponse:
    return ExpiringResponse(
        today=result.window.today,
        horizon=result.window.horizon,
        items=contract_hits(result.contracts, clients, fallback),
        total=result.count,
    )


def trend_response(trend: MonthlyTrend) -> TrendResponse:
    return TrendResponse(
        buckets=[
            MonthBucketModel(key=b.key, year=b.year, month=b.month, label=b.label, count=b.count)
            for b in trend.buckets
        ],
        max_count=trend.max_count,
        total=trend.total,
    )


def _tally_model(tally: TallyOutput) -> ProviderTallyModel:
    return ProviderTallyModel(
        counts=[
            ProviderCountModel(
                provider=c.provider, label=c.label, count=c.count, color_key=c.color_key
            )
            for c in tally.counts
        ],
        total_contracts=tally.total_contracts,
    )


def tally_response(energy: TallyOutput, telephony: TallyOutput) -> ProviderTallyResponse:
    return ProviderTallyResponse(energy=_tally_model(energy), telephony=_tally_model(telephony))


def dashboard_response(result: DashboardOutput) -> DashboardResponse:
    """Convert a successful dashboard snapshot."""
    items = [ContractHit(contract=a.contract, client_name=a.client_name) for a in result.expiring]
    return DashboardResponse(
        reference=result.reference,
        total_clients=result.total_clients,
        commission=commission_response(result.commission, include_contracts=False),
        expiring=ExpiringResponse(
            today=result.expiring_window.today,
            horizon=result.expiring_window.horizon,
            items=items,
            total=len(items),
        ),
        trend=trend_response(result.trend),
        providers_tally=tally_response(result.energy, result.telephony),
        available_years=list(result.available_years),
        providers=list(result.providers),
    )
