"""
Protocol registry: the closed set of chain families a data source can target.

Each variant declares the data source kinds it accepts (including legacy
spellings), the networks it can be deployed to, and the capabilities that
decide which manifest checks and code generators apply to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from subgraph_manifest.errors import ProtocolError, UnknownKindError


class ProtocolName(str, Enum):
    """Supported protocol identifiers."""

    ETHEREUM = "ethereum"
    NEAR = "near"
    COSMOS = "cosmos"


@dataclass(frozen=True)
class ProtocolCapabilities:
    """What a protocol's data sources can declare."""

    has_abis: bool = False
    has_contract: bool = False
    has_events: bool = False
    has_templates: bool = False


@dataclass(frozen=True)
class ProtocolVariant:
    """Immutable description of one protocol."""

    name: ProtocolName
    display_name: str
    kinds: tuple[str, ...]
    networks: tuple[str, ...]
    capabilities: ProtocolCapabilities

    @property
    def has_abis(self) -> bool:
        return self.capabilities.has_abis

    @property
    def has_contract(self) -> bool:
        return self.capabilities.has_contract

    @property
    def has_events(self) -> bool:
        return self.capabilities.has_events

    @property
    def has_templates(self) -> bool:
        return self.capabilities.has_templates

    def is_valid_kind_name(self, kind: str) -> bool:
        """Check whether ``kind`` is one of this protocol's aliases."""
        return kind in self.kinds

    def is_valid_network(self, network: str) -> bool:
        """Check whether ``network`` is a known network of this protocol."""
        return network in self.networks


_VARIANTS: Mapping[ProtocolName, ProtocolVariant] = MappingProxyType(
    {
        ProtocolName.ETHEREUM: ProtocolVariant(
            name=ProtocolName.ETHEREUM,
            display_name="Ethereum",
            # `ethereum/contract` is kept for backwards compatibility
            kinds=("ethereum", "ethereum/contract"),
            networks=(
                "mainnet",
                "kovan",
                "rinkeby",
                "ropsten",
                "goerli",
                "poa-core",
                "poa-sokol",
                "xdai",
                "matic",
                "mumbai",
                "fantom",
                "bsc",
                "chapel",
                "clover",
                "avalanche",
                "fuji",
                "celo",
                "celo-alfajores",
                "fuse",
                "mbase",
                "arbitrum-one",
                "arbitrum-rinkeby",
                "optimism",
                "optimism-kovan",
                "aurora",
                "aurora-testnet",
            ),
            capabilities=ProtocolCapabilities(
                has_abis=True, has_contract=True, has_events=True, has_templates=True
            ),
        ),
        ProtocolName.NEAR: ProtocolVariant(
            name=ProtocolName.NEAR,
            display_name="NEAR",
            kinds=("near",),
            networks=("near-mainnet", "near-testnet"),
            capabilities=ProtocolCapabilities(has_contract=True),
        ),
        ProtocolName.COSMOS: ProtocolVariant(
            name=ProtocolName.COSMOS,
            display_name="Cosmos",
            kinds=("cosmos",),
            networks=("cosmoshub-4",),
            capabilities=ProtocolCapabilities(),
        ),
    }
)


def all_variants() -> tuple[ProtocolVariant, ...]:
    """All registered protocols, in declaration order."""
    return tuple(_VARIANTS.values())


def available_protocols() -> dict[str, tuple[str, ...]]:
    """Map protocol names to their accepted data source kinds."""
    return {variant.name.value: variant.kinds for variant in _VARIANTS.values()}


def available_networks() -> dict[str, tuple[str, ...]]:
    """Map protocol names to their known networks."""
    return {variant.name.value: variant.networks for variant in _VARIANTS.values()}


def get_variant(name: str | ProtocolName) -> ProtocolVariant:
    """Look up a protocol by name.

    Raises:
        ProtocolError: If the name is not a registered protocol
    """
    try:
        return _VARIANTS[ProtocolName(name)]
    except ValueError:
        raise ProtocolError(
            f"Unknown protocol '{name}'. Supported protocols: "
            f"{', '.join(p.value for p in ProtocolName)}",
            protocol=str(name),
        ) from None


def variant_for_kind(kind: Any) -> ProtocolVariant | None:
    """Reverse lookup from a data source kind to its protocol."""
    if not isinstance(kind, str):
        return None
    for variant in _VARIANTS.values():
        if variant.is_valid_kind_name(kind):
            return variant
    return None


def require_variant_for_kind(kind: Any) -> ProtocolVariant:
    """Like :func:`variant_for_kind` but raises for unsupported kinds.

    Raises:
        UnknownKindError: If no protocol accepts ``kind``
    """
    variant = variant_for_kind(kind)
    if variant is None:
        raise UnknownKindError(kind).with_hint(
            "supported kinds: "
            + ", ".join(k for v in _VARIANTS.values() for k in v.kinds)
        )
    return variant


def is_valid_network(variant: ProtocolVariant, network: str) -> bool:
    return variant.is_valid_network(network)


def variant_from_data_sources(data_sources: Iterable[Mapping[str, Any] | Any]) -> ProtocolVariant:
    """Pick the protocol of the first data source (or template).

    Raises:
        ProtocolError: If there are no data sources
        UnknownKindError: If the first kind is not supported
    """
    for entry in data_sources:
        kind = entry.get("kind") if isinstance(entry, Mapping) else getattr(entry, "kind", None)
        return require_variant_for_kind(kind)
    raise ProtocolError("Cannot determine the protocol of a manifest without data sources")
