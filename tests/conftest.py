from datetime import date, datetime
from pathlib import Path

import pytest

from clientdesk.adapters.clock import FrozenClock
from clientdesk.adapters.rules_ports import RulesAdapter
from clientdesk.domain.entities import Address, Client, Contract, ContractType, Iban
from clientdesk.rules.loader import load_rules
from clientdesk.rules.models import Rules

# Reference "now" shared by the API, CLI and regression tests.
NOW = datetime(2024, 3, 20, 10, 30)


@pytest.fixture
def rules() -> Rules:
    # Load REAL rules from project root
    rules_path = Path(__file__).resolve().parent.parent / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def rules_adapter(rules: Rules) -> RulesAdapter:
    return RulesAdapter(rules)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(NOW, "Europe/Rome")


@pytest.fixture
def clients() -> list[Client]:
    return [
        Client(
            id="c1",
            first_name="Mario",
            last_name="Rossi",
            email="mario.rossi@example.it",
            codice_fiscale="RSSMRA80A01H501U",
            mobile_phone="3331234567",
            ibans=(Iban(value="IT60X0542811101000000123456", label="Conto principale"),),
            legal_address=Address(street="Via Roma 1", zip_code="00100", city="Roma"),
            created_at=datetime(2024, 3, 2, 9, 0),
        ),
        Client(
            id="c2",
            first_name="Anna",
            last_name="Bianchi",
            email="anna@example.it",
            residential_address=Address(street="Corso Milano 5", city="Torino"),
            created_at=datetime(2024, 1, 15, 12, 0),
        ),
        Client(
            id="c3",
            first_name="Luca",
            last_name="Verdi",
            created_at=datetime(2023, 6, 1, 8, 0),
        ),
    ]


@pytest.fixture
def contracts() -> list[Contract]:
    return [
        Contract(
            id="k1",
            client_id="c1",
            type=ContractType.ELECTRICITY,
            provider="Enel",
            contract_code="EN-001",
            start_date=date(2024, 3, 10),
            end_date=date(2024, 4, 10),
            commission=100.0,
            supply_address=Address(street="Via Roma 1", city="Roma"),
        ),
        Contract(
            id="k2",
            client_id="c2",
            type=ContractType.TELEPHONY,
            provider="TIM",
            contract_code="TIM-777",
            start_date=date(2024, 3, 15),
            end_date=date(2025, 3, 15),
            commission=50.0,
        ),
        Contract(
            id="k3",
            client_id="c1",
            type=ContractType.GAS,
            provider="Edison",
            start_date=date(2023, 11, 1),
            end_date=date(2024, 3, 20),
            commission=30.0,
        ),
        Contract(
            id="k4",
            client_id="ghost",
            type=ContractType.TELEPHONY,
            provider="Enel",
            commission=None,
        ),
    ]


@pytest.fixture
def providers() -> list[str]:
    return ["TIM", "Enel", "Edison", "Vodafone"]
