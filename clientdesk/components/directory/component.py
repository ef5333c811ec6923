"""
Directory component - Client and contract list views.

Handles the provider filter on the contract list, client ordering,
client-name resolution and the provider catalogue.

Invariants:
- I1: Inputs are never reordered or mutated in place
- I2: A dangling client reference never drops a contract row
- I3: Provider names are unique case-insensitively
"""

from __future__ import annotations

from ._impl import (
    DirectoryConfig,
    add_provider,
    client_display_name,
    filter_by_provider,
    index_clients,
    sort_clients,
    validate_provider,
)
from .models import (
    AddProviderInput,
    ClientListInput,
    ClientListOutput,
    ContractListInput,
    ContractListOutput,
    ContractRow,
    ProviderCatalogOutput,
)
from .ports import RulesPort


def _build_config(rules: RulesPort | None) -> DirectoryConfig:
    """Build directory config from rules port."""
    if rules is None:
        return DirectoryConfig()
    return DirectoryConfig(
        unknown_client_label=rules.get_unknown_client_label(),
        missing_client_label=rules.get_missing_client_label(),
    )


# --- Component Entry Points ---


def run_contract_list(
    inp: ContractListInput,
    *,
    rules: RulesPort | None = None,
) -> ContractListOutput:
    """List contracts for one provider (or all) with their client names."""
    config = _build_config(rules)
    by_id = index_clients(inp.clients)
    rows = tuple(
        ContractRow(
            contract=contract,
            client_name=client_display_name(
                contract.client_id, by_id, config.missing_client_label
            ),
        )
        for contract in filter_by_provider(inp.contracts, inp.provider)
    )
    return ContractListOutput(rows=rows, total=len(rows))


def run_client_list(inp: ClientListInput) -> ClientListOutput:
    """List clients sorted by name."""
    clients = tuple(sort_clients(inp.clients))
    return ClientListOutput(clients=clients, total=len(clients))


def run_add_provider(inp: AddProviderInput) -> ProviderCatalogOutput:
    """
    Add a provider to the catalogue.

    Returns:
        ProviderCatalogOutput with the new catalogue, or the unchanged
        catalogue and validation errors.
    """
    errors = validate_provider(inp.providers, inp.candidate)
    if errors:
        return ProviderCatalogOutput(
            providers=tuple(inp.providers),
            errors=errors,
            success=False,
        )
    return ProviderCatalogOutput(
        providers=tuple(add_provider(inp.providers, inp.candidate)),
        added=inp.candidate.strip(),
    )


def run(
    inp: ContractListInput | ClientListInput | AddProviderInput,
    *,
    rules: RulesPort | None = None,
) -> ContractListOutput | ClientListOutput | ProviderCatalogOutput:
    """
    Main entry point for the directory component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ContractListInput):
        return run_contract_list(inp, rules=rules)
    elif isinstance(inp, ClientListInput):
        return run_client_list(inp)
    elif isinstance(inp, AddProviderInput):
        return run_add_provider(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
