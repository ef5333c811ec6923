from datetime import date, datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# --- Enums / Literals ---

AllFilter = Literal["all"]


class ContractType(str, Enum):
    ELECTRICITY = "Electricity"
    GAS = "Gas"
    TELEPHONY = "Telephony"


ENERGY_TYPES = frozenset({ContractType.ELECTRICITY, ContractType.GAS})


class _Record(BaseModel):
    # Persistence shape is camelCase; snake_case names are accepted too.
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# --- Addresses ---

class Address(_Record):
    street: str | None = None
    zip_code: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None


# --- Clients ---

class Iban(_Record):
    value: str
    label: str = ""


class Client(_Record):
    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    codice_fiscale: str = ""
    mobile_phone: str = ""
    ibans: tuple[Iban, ...] = Field(default_factory=tuple)
    legal_address: Address | None = None
    residential_address: Address | None = None
    created_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


# --- Contracts ---

class Contract(_Record):
    id: str
    client_id: str
    type: ContractType
    provider: str
    contract_code: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    commission: float | None = Field(default=None, ge=0)
    supply_address: Address | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _truncate_to_date(cls, value: Any) -> Any:
        """
        Stored dates may carry a time component; keep the calendar day.

        Values are taken as already local. Zone-aware timestamps are moved
        to the display timezone by the snapshot adapter before this runs.
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10 and value[10] in "T ":
            return value[:10]
        if value == "":
            return None
        return value

    @property
    def is_energy(self) -> bool:
        return self.type in ENERGY_TYPES
