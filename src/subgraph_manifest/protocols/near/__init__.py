"""NEAR protocol: account-bound data sources with receipt handlers."""

from subgraph_manifest.protocols.near.contract import ACCOUNT_PATTERN, NearContract
from subgraph_manifest.protocols.near.scaffold import NearManifestScaffold, NearMappingScaffold
from subgraph_manifest.protocols.near.subgraph import NearSubgraph

__all__ = [
    "ACCOUNT_PATTERN",
    "NearContract",
    "NearManifestScaffold",
    "NearMappingScaffold",
    "NearSubgraph",
]
