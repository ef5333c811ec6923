import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel

from clientdesk.adapters.clock import create_clock
from clientdesk.adapters.json_snapshot import JsonSnapshotRepo
from clientdesk.adapters.rules_ports import RulesAdapter
from clientdesk.api.schemas import (
    SearchResponse,
    contract_hits,
    dashboard_response,
    expiring_response,
    tally_response,
    trend_response,
    validation_errors,
)
from clientdesk.components.dashboard import DashboardInput, run_dashboard
from clientdesk.components.expiring import ExpiringInput, run_expiring
from clientdesk.components.providers import CategoryTallyInput, run_category_tallies
from clientdesk.components.search import SearchInput, run_search
from clientdesk.components.trend import TrendInput, run_trend
from clientdesk.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"
DATA_FILE = os.path.join("data", "snapshot.json")


class CliContext:
    """Rules, clock and snapshot wired for one CLI run."""

    def __init__(
        self, rules_path: Path, data_file: Path, frozen_now: datetime | None = None
    ) -> None:
        self.rules = RulesAdapter(load_rules(rules_path))
        tz_name = self.rules.rules.locale.timezone
        self.clock = create_clock(tz_name, frozen_now)
        self.repo = JsonSnapshotRepo(data_file, tz_name)


def get_context(args: argparse.Namespace) -> CliContext:
    rules_path = Path(args.rules)
    data_file = Path(args.data)
    frozen_now = None
    if args.now:
        try:
            frozen_now = datetime.fromisoformat(args.now)
        except ValueError:
            logger.error(f"Invalid --now value '{args.now}': expected an ISO date or datetime.")
            sys.exit(1)
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)
    if not data_file.exists():
        logger.error(f"Snapshot file {data_file} not found.")
        sys.exit(1)

    try:
        return CliContext(rules_path, data_file, frozen_now)
    except ValueError as e:
        logger.error(f"Invalid rules file {rules_path}: {e}")
        sys.exit(1)


def emit(model: BaseModel) -> None:
    print(model.model_dump_json(by_alias=True, indent=2))


def handle_summary(ctx: CliContext, args: argparse.Namespace) -> None:
    result = run_dashboard(
        DashboardInput(
            clients=ctx.repo.list_clients(),
            contracts=ctx.repo.list_contracts(),
            providers=ctx.repo.list_providers(),
            year=args.year,
            month=args.month,
            provider=args.provider,
        ),
        rules=ctx.rules,
        time_port=ctx.clock,
    )
    if not result.success:
        for error in validation_errors(result.commission):
            logger.error(f"{error['field']}: {error['message']}")
        sys.exit(1)
    emit(dashboard_response(result))


def handle_search(ctx: CliContext, args: argparse.Namespace) -> None:
    clients = ctx.repo.list_clients()
    result = run_search(SearchInput(args.query, clients, ctx.repo.list_contracts()), rules=ctx.rules)
    if result.query_too_short:
        logger.warning(
            f"Query shorter than {ctx.rules.get_min_query_length()} characters; nothing searched."
        )
    emit(
        SearchResponse(
            query=args.query,
            query_too_short=result.query_too_short,
            clients=list(result.result.clients),
            contracts=contract_hits(
                result.result.contracts, clients, ctx.rules.get_unknown_client_label()
            ),
        )
    )


def handle_expiring(ctx: CliContext, args: argparse.Namespace) -> None:
    result = run_expiring(
        ExpiringInput(ctx.repo.list_contracts()), time_port=ctx.clock, rules=ctx.rules
    )
    emit(expiring_response(result, ctx.repo.list_clients(), ctx.rules.get_unknown_client_label()))


def handle_trend(ctx: CliContext, args: argparse.Namespace) -> None:
    result = run_trend(TrendInput(ctx.repo.list_clients()), time_port=ctx.clock, rules=ctx.rules)
    emit(trend_response(result.trend))


def handle_providers(ctx: CliContext, args: argparse.Namespace) -> None:
    tallies = run_category_tallies(CategoryTallyInput(ctx.repo.list_contracts()), rules=ctx.rules)
    emit(tally_response(tallies.energy, tallies.telephony))


HANDLERS = {
    "summary": handle_summary,
    "search": handle_search,
    "expiring": handle_expiring,
    "trend": handle_trend,
    "providers": handle_providers,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Client Desk CLI")
    parser.add_argument(
        "--rules",
        default=os.environ.get("CLIENTDESK_RULES_PATH", RULES_PATH),
        help="Path to rules.yaml",
    )
    parser.add_argument(
        "--data",
        default=os.environ.get("CLIENTDESK_DATA_FILE", DATA_FILE),
        help="Path to the JSON snapshot",
    )
    parser.add_argument(
        "--now",
        default=None,
        help="Pin the reference time (ISO date or datetime, local to the rules timezone)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # summary
    summary_parser = subparsers.add_parser("summary", help="Full dashboard snapshot")
    summary_parser.add_argument("--year", default="all", help="Start year or 'all'")
    summary_parser.add_argument("--month", default="all", help="Start month (1-12) or 'all'")
    summary_parser.add_argument("--provider", default="all", help="Provider name or 'all'")

    # search
    search_parser = subparsers.add_parser("search", help="Search clients and contracts")
    search_parser.add_argument("query", help="Free-text query")

    # expiring
    subparsers.add_parser("expiring", help="Contracts expiring soon")

    # trend
    subparsers.add_parser("trend", help="New clients per month")

    # providers
    subparsers.add_parser("providers", help="Contracts per tracked provider")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    ctx = get_context(args)

    try:
        HANDLERS[args.command](ctx, args)
    except ValueError as e:
        logger.error(f"Invalid snapshot: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
