"""
JSON snapshot repository (SnapshotRepoPort implementation).

Reads the client/contract snapshot exported by the persistence service:

    {"clients": [...], "contracts": [...], "providers": [...]}

Legacy client records carrying a single ``iban`` string are migrated into
the ``ibans`` list here, once, before any record reaches the engine.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import ValidationError

from clientdesk.adapters.clock import DEFAULT_TIMEZONE
from clientdesk.domain.entities import Client, Contract

logger = logging.getLogger(__name__)


def migrate_legacy_client(raw: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize a legacy client record into the current IBAN-list shape.

    The legacy value becomes the first ``ibans`` entry unless the list
    already holds it. The input dict is not modified.
    """
    if not isinstance(raw, dict) or "iban" not in raw:
        return raw

    record = {k: v for k, v in raw.items() if k != "iban"}
    legacy = raw.get("iban")
    ibans = list(record.get("ibans") or [])
    if legacy and not any(_iban_value(entry) == legacy for entry in ibans):
        ibans.insert(0, {"value": legacy, "label": ""})
    record["ibans"] = ibans
    return record


def _iban_value(entry: Any) -> Any:
    return entry.get("value") if isinstance(entry, dict) else entry


_DATE_KEYS = ("startDate", "endDate", "start_date", "end_date")


def localize_contract_dates(raw: dict[str, Any], tz: ZoneInfo) -> dict[str, Any]:
    """
    Replace zone-aware contract timestamps with their calendar day in ``tz``.

    "2024-03-31T23:30:00Z" is already April 1st in Rome, and month filters
    must agree with the local calendar. Naive values and plain dates are
    left for the entity validator. The input dict is not modified.
    """
    if not isinstance(raw, dict):
        return raw

    record = dict(raw)
    for key in _DATE_KEYS:
        value = record.get(key)
        if not isinstance(value, str) or len(value) <= 10:
            continue
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            continue  # the entity validator reports it
        if parsed.tzinfo is not None:
            record[key] = parsed.astimezone(tz).date().isoformat()
    return record


def _parse_records(raw_records: Sequence[Any], model: type, kind: str) -> list[Any]:
    records = []
    for index, raw in enumerate(raw_records):
        try:
            records.append(model.model_validate(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid {kind} record at index {index}:\n{e}") from e
    return records


class InMemorySnapshotRepo:
    """In-memory snapshot repository for testing/embedding."""

    def __init__(
        self,
        clients: Sequence[Client] = (),
        contracts: Sequence[Contract] = (),
        providers: Sequence[str] = (),
    ) -> None:
        self._clients = list(clients)
        self._contracts = list(contracts)
        self._providers = list(providers)

    def list_clients(self) -> list[Client]:
        return list(self._clients)

    def list_contracts(self) -> list[Contract]:
        return list(self._contracts)

    def list_providers(self) -> list[str]:
        return list(self._providers)


class JsonSnapshotRepo:
    """Snapshot repository backed by a JSON export file."""

    def __init__(self, path: Path, tz_name: str = DEFAULT_TIMEZONE) -> None:
        self._path = Path(path)
        self._tz = ZoneInfo(tz_name)
        self._loaded: InMemorySnapshotRepo | None = None

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> InMemorySnapshotRepo:
        if self._loaded is not None:
            return self._loaded

        if not self._path.exists():
            raise FileNotFoundError(f"Snapshot file not found at: {self._path}")

        with open(self._path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in snapshot file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError("Snapshot file must contain a JSON object")

        raw_clients = data.get("clients") or []
        migrated = [migrate_legacy_client(raw) for raw in raw_clients]
        legacy_count = sum(1 for raw in raw_clients if isinstance(raw, dict) and "iban" in raw)
        if legacy_count:
            logger.info(
                "Migrated %d legacy client record(s) to the IBAN list shape", legacy_count
            )

        raw_contracts = [
            localize_contract_dates(raw, self._tz) for raw in data.get("contracts") or []
        ]
        self._loaded = InMemorySnapshotRepo(
            clients=_parse_records(migrated, Client, "client"),
            contracts=_parse_records(raw_contracts, Contract, "contract"),
            providers=[str(p) for p in data.get("providers") or []],
        )
        logger.info(
            "Loaded snapshot from %s: %d clients, %d contracts",
            self._path,
            len(self._loaded.list_clients()),
            len(self._loaded.list_contracts()),
        )
        return self._loaded

    def reload(self) -> None:
        """Drop the cached snapshot so the next read hits the file again."""
        self._loaded = None

    def list_clients(self) -> list[Client]:
        return self._load().list_clients()

    def list_contracts(self) -> list[Contract]:
        return self._load().list_contracts()

    def list_providers(self) -> list[str]:
        return self._load().list_providers()
