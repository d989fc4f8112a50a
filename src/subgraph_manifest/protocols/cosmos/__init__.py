"""Cosmos protocol: no contracts, ABIs or templates."""

from subgraph_manifest.protocols.cosmos.scaffold import (
    CosmosManifestScaffold,
    CosmosMappingScaffold,
)
from subgraph_manifest.protocols.cosmos.subgraph import CosmosSubgraph

__all__ = [
    "CosmosManifestScaffold",
    "CosmosMappingScaffold",
    "CosmosSubgraph",
]
