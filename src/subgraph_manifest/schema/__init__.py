"""
Schema layer - the type model manifests are validated against.
"""

from subgraph_manifest.schema.model import (
    BUILTIN_SCALARS,
    ROOT_TYPE,
    FieldDefinition,
    TypeDefinition,
    TypeKind,
    TypeRef,
    TypeSchema,
    default_schema,
    load_schema,
)

__all__ = [
    "BUILTIN_SCALARS",
    "FieldDefinition",
    "ROOT_TYPE",
    "TypeDefinition",
    "TypeKind",
    "TypeRef",
    "TypeSchema",
    "default_schema",
    "load_schema",
]
