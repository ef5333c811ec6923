# clientdesk: Services (shared pure helpers)
# Used by several components; no I/O here

from clientdesk.core.services.address import (
    ADDRESS_FIELDS,
    address_parts,
    format_address_for_search,
)

__all__ = [
    "ADDRESS_FIELDS",
    "address_parts",
    "format_address_for_search",
]
