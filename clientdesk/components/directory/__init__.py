"""
Directory component - Client and contract list views, provider catalogue.
"""

from ._impl import (
    DEFAULT_CONFIG,
    DirectoryConfig,
    add_provider,
    client_display_name,
    filter_by_provider,
    index_clients,
    sort_clients,
    sorted_providers,
    validate_provider,
)
from .component import run, run_add_provider, run_client_list, run_contract_list
from .models import (
    AddProviderInput,
    ClientListInput,
    ClientListOutput,
    ContractListInput,
    ContractListOutput,
    ContractRow,
    DirectoryValidationError,
    ProviderCatalogOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_add_provider",
    "run_client_list",
    "run_contract_list",
    # Input models
    "AddProviderInput",
    "ClientListInput",
    "ContractListInput",
    # Output models
    "ClientListOutput",
    "ContractListOutput",
    "ContractRow",
    "DirectoryValidationError",
    "ProviderCatalogOutput",
    # Ports
    "RulesPort",
    # Functional core
    "DEFAULT_CONFIG",
    "DirectoryConfig",
    "add_provider",
    "client_display_name",
    "filter_by_provider",
    "index_clients",
    "sort_clients",
    "sorted_providers",
    "validate_provider",
]
