"""
Protocol layer - registry of supported chain families and their collaborators.

Every factory below dispatches on the closed ``ProtocolName`` enumeration.
Adding a protocol means adding an enum member, a registry entry and one
``case`` per factory; ``assert_never`` makes a missed case a type error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, assert_never

from subgraph_manifest.errors import ProtocolError
from subgraph_manifest.protocols.base import (
    Contract,
    ContractValidation,
    ManifestScaffold,
    MappingScaffold,
    ProtocolSubgraph,
)
from subgraph_manifest.protocols.cosmos import (
    CosmosManifestScaffold,
    CosmosMappingScaffold,
    CosmosSubgraph,
)
from subgraph_manifest.protocols.ethereum import (
    Abi,
    EthereumContract,
    EthereumManifestScaffold,
    EthereumMappingScaffold,
    EthereumSubgraph,
    EthereumTemplateCodeGen,
)
from subgraph_manifest.protocols.near import (
    NearContract,
    NearManifestScaffold,
    NearMappingScaffold,
    NearSubgraph,
)
from subgraph_manifest.protocols.registry import (
    ProtocolCapabilities,
    ProtocolName,
    ProtocolVariant,
    all_variants,
    available_networks,
    available_protocols,
    get_variant,
    is_valid_network,
    require_variant_for_kind,
    variant_for_kind,
    variant_from_data_sources,
)

ProtocolLike = ProtocolVariant | ProtocolName | str


def _variant(protocol: ProtocolLike) -> ProtocolVariant:
    if isinstance(protocol, ProtocolVariant):
        return protocol
    return get_variant(protocol)


def _unsupported(variant: ProtocolVariant, what: str) -> ProtocolError:
    return ProtocolError(
        f"{what} are not supported for data sources with kind '{variant.name.value}'",
        protocol=variant.name.value,
    )


def get_abi_class(protocol: ProtocolLike) -> type[Abi]:
    """ABI loader of a protocol.

    Raises:
        ProtocolError: If the protocol has no ABIs
    """
    variant = _variant(protocol)
    if not variant.has_abis:
        raise _unsupported(variant, "ABIs")
    match variant.name:
        case ProtocolName.ETHEREUM:
            return Abi
        case ProtocolName.NEAR | ProtocolName.COSMOS:
            raise _unsupported(variant, "ABIs")
        case _:
            assert_never(variant.name)


def get_contract_class(protocol: ProtocolLike) -> type[Contract]:
    """Contract identifier validator of a protocol.

    Raises:
        ProtocolError: If the protocol has no contracts
    """
    variant = _variant(protocol)
    if not variant.has_contract:
        raise _unsupported(variant, "Contracts")
    match variant.name:
        case ProtocolName.ETHEREUM:
            return EthereumContract
        case ProtocolName.NEAR:
            return NearContract
        case ProtocolName.COSMOS:
            raise _unsupported(variant, "Contracts")
        case _:
            assert_never(variant.name)


def get_subgraph(protocol: ProtocolLike) -> ProtocolSubgraph:
    """Manifest semantics of a protocol."""
    variant = _variant(protocol)
    match variant.name:
        case ProtocolName.ETHEREUM:
            return EthereumSubgraph(variant)
        case ProtocolName.NEAR:
            return NearSubgraph(variant)
        case ProtocolName.COSMOS:
            return CosmosSubgraph(variant)
        case _:
            assert_never(variant.name)


def get_manifest_scaffold(protocol: ProtocolLike) -> ManifestScaffold:
    """Default manifest sections for new data sources of a protocol."""
    variant = _variant(protocol)
    match variant.name:
        case ProtocolName.ETHEREUM:
            return EthereumManifestScaffold()
        case ProtocolName.NEAR:
            return NearManifestScaffold()
        case ProtocolName.COSMOS:
            return CosmosManifestScaffold()
        case _:
            assert_never(variant.name)


def get_mapping_scaffold(protocol: ProtocolLike) -> MappingScaffold:
    """Default mapping source generator of a protocol."""
    variant = _variant(protocol)
    match variant.name:
        case ProtocolName.ETHEREUM:
            return EthereumMappingScaffold()
        case ProtocolName.NEAR:
            return NearMappingScaffold()
        case ProtocolName.COSMOS:
            return CosmosMappingScaffold()
        case _:
            assert_never(variant.name)


def get_template_codegen(
    protocol: ProtocolLike, template: Mapping[str, Any] | Any
) -> EthereumTemplateCodeGen:
    """Code generator for a data source template.

    Raises:
        ProtocolError: If the protocol has no templates
    """
    variant = _variant(protocol)
    if not variant.has_templates:
        raise _unsupported(variant, "Template data sources")
    match variant.name:
        case ProtocolName.ETHEREUM:
            return EthereumTemplateCodeGen(template)
        case ProtocolName.NEAR | ProtocolName.COSMOS:
            raise _unsupported(variant, "Template data sources")
        case _:
            assert_never(variant.name)


__all__ = [
    "Contract",
    "ContractValidation",
    "ManifestScaffold",
    "MappingScaffold",
    "ProtocolCapabilities",
    "ProtocolLike",
    "ProtocolName",
    "ProtocolSubgraph",
    "ProtocolVariant",
    "all_variants",
    "available_networks",
    "available_protocols",
    "get_abi_class",
    "get_contract_class",
    "get_manifest_scaffold",
    "get_mapping_scaffold",
    "get_subgraph",
    "get_template_codegen",
    "get_variant",
    "is_valid_network",
    "require_variant_for_kind",
    "variant_for_kind",
    "variant_from_data_sources",
]
