"""
Error hierarchy for subgraph-manifest.

Raised errors are reserved for broken assets, programming mistakes and the
final combined manifest report; data defects are collected as records.
"""

from subgraph_manifest.errors.base import (
    AbiError,
    ErrorContext,
    ManifestError,
    ProtocolError,
    SchemaDefinitionError,
    SubgraphError,
    UnknownKindError,
)

__all__ = [
    "AbiError",
    "ErrorContext",
    "ManifestError",
    "ProtocolError",
    "SchemaDefinitionError",
    "SubgraphError",
    "UnknownKindError",
]
