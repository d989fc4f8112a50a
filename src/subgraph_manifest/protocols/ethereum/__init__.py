"""Ethereum protocol: contracts with ABIs, events and templates."""

from subgraph_manifest.protocols.ethereum.abi import Abi, AbiEntry, AbiParameter
from subgraph_manifest.protocols.ethereum.codegen import EthereumTemplateCodeGen
from subgraph_manifest.protocols.ethereum.contract import ADDRESS_PATTERN, EthereumContract
from subgraph_manifest.protocols.ethereum.scaffold import (
    EthereumManifestScaffold,
    EthereumMappingScaffold,
)
from subgraph_manifest.protocols.ethereum.subgraph import EthereumSubgraph

__all__ = [
    "ADDRESS_PATTERN",
    "Abi",
    "AbiEntry",
    "AbiParameter",
    "EthereumContract",
    "EthereumManifestScaffold",
    "EthereumMappingScaffold",
    "EthereumSubgraph",
    "EthereumTemplateCodeGen",
]
