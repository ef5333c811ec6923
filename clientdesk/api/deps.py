import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from clientdesk.adapters.clock import create_clock
from clientdesk.adapters.json_snapshot import JsonSnapshotRepo
from clientdesk.adapters.rules_ports import RulesAdapter
from clientdesk.core.ports import SnapshotRepoPort, TimePort
from clientdesk.rules.loader import load_rules
from clientdesk.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("CLIENTDESK_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )
        self.data_file = Path(
            os.environ.get("CLIENTDESK_DATA_FILE", str(self.base_dir / "data" / "snapshot.json"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def _load_rules_cached(path: Path) -> Rules:
    return load_rules(path)


def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return _load_rules_cached(settings.rules_path)


def get_rules_adapter(rules: Rules = Depends(get_rules)) -> RulesAdapter:
    return RulesAdapter(rules)


# --- Snapshot ---
def get_snapshot_repo(
    settings: Settings = Depends(get_settings), rules: Rules = Depends(get_rules)
) -> SnapshotRepoPort:
    # One repo per request: every request sees the latest export.
    return JsonSnapshotRepo(settings.data_file, rules.locale.timezone)


# --- Clock ---
def get_clock(rules: Rules = Depends(get_rules)) -> TimePort:
    return create_clock(rules.locale.timezone)
