"""
subgraph-manifest: validation and protocol tooling for subgraph manifests.

Validates manifest documents against a versioned type schema, cross-checks
them against contract ABIs, and dispatches protocol-specific behavior
(ABIs, contracts, scaffolding, template codegen) per chain family.
"""
from __future__ import annotations

from subgraph_manifest.errors import (
    AbiError,
    ManifestError,
    ProtocolError,
    SchemaDefinitionError,
    SubgraphError,
    UnknownKindError,
)
from subgraph_manifest.loader import ManifestLoader, load_manifest, write_manifest
from subgraph_manifest.manifest import Manifest
from subgraph_manifest.protocols import (
    ProtocolName,
    ProtocolVariant,
    get_variant,
    variant_for_kind,
)
from subgraph_manifest.schema import TypeSchema, default_schema, load_schema
from subgraph_manifest.validation import (
    ValidationError,
    cross_validate,
    format_errors,
    validate,
    validate_manifest,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "AbiError",
    "ManifestError",
    "ProtocolError",
    "SchemaDefinitionError",
    "SubgraphError",
    "UnknownKindError",
    # Loading
    "Manifest",
    "ManifestLoader",
    "load_manifest",
    "write_manifest",
    # Protocols
    "ProtocolName",
    "ProtocolVariant",
    "get_variant",
    "variant_for_kind",
    # Schema
    "TypeSchema",
    "default_schema",
    "load_schema",
    # Validation
    "ValidationError",
    "cross_validate",
    "format_errors",
    "validate",
    "validate_manifest",
    # Version
    "__version__",
]
