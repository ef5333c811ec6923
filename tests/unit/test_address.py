"""
Address formatting tests.
"""

from __future__ import annotations

from clientdesk.core.services import address_parts, format_address_for_search
from clientdesk.domain.entities import Address


def test_all_fields_in_order() -> None:
    address = Address(
        street="Via Roma 1", zip_code="00100", city="Roma", state="RM", country="Italia"
    )
    assert format_address_for_search(address) == "via roma 1 00100 roma rm italia"


def test_missing_fields_skipped() -> None:
    address = Address(street="Via Po 3", city="Torino")
    assert format_address_for_search(address) == "via po 3 torino"


def test_empty_strings_skipped() -> None:
    address = Address(street="", zip_code="10100", city="", country="IT")
    assert address_parts(address) == ["10100", "IT"]
    assert format_address_for_search(address) == "10100 it"


def test_none_address() -> None:
    assert format_address_for_search(None) == ""
    assert address_parts(None) == []


def test_empty_address() -> None:
    assert format_address_for_search(Address()) == ""


def test_camel_case_payload() -> None:
    address = Address.model_validate({"street": "Via Po", "zipCode": "10100"})
    assert format_address_for_search(address) == "via po 10100"
