"""
AddressFormatter - flattens postal addresses for search.

Key behaviors:
- Non-empty fields kept in street, zip, city, state, country order
- Joined by a single space and lowercased
- Missing address yields an empty string
"""

from __future__ import annotations

from clientdesk.domain.entities import Address

ADDRESS_FIELDS: tuple[str, ...] = ("street", "zip_code", "city", "state", "country")


def address_parts(address: Address | None) -> list[str]:
    """Non-empty address fields in display order."""
    if address is None:
        return []
    parts = (getattr(address, name) for name in ADDRESS_FIELDS)
    return [part for part in parts if part]


def format_address_for_search(address: Address | None) -> str:
    """Single lowercase searchable string for an address."""
    return " ".join(address_parts(address)).lower()
