"""
Type schema model for manifest validation.

The manifest layout is described by a GraphQL SDL asset: ``scalar``
declarations plus object types whose fields may be non-null and/or lists.
This module turns the parsed SDL into an immutable type table that the
schema validator walks. The table is built once and only read afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from graphql import GraphQLError, parse
from graphql.language import (
    DocumentNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
)

from subgraph_manifest.errors import SchemaDefinitionError

# Root type of the packaged manifest schema
ROOT_TYPE = "SubgraphManifest"

# Scalars that resolve even when the schema does not declare them
BUILTIN_SCALARS = frozenset({"String", "File", "BigInt", "Boolean", "Int"})

_DEFAULT_SCHEMA_PATH = Path(__file__).parent / "manifest-schema.graphql"


class TypeKind(str, Enum):
    """Kind of a named type."""

    SCALAR = "scalar"
    OBJECT = "object"


@dataclass(frozen=True)
class TypeRef:
    """Reference from a field to a named type.

    ``item_required`` only applies to lists and marks non-null elements.
    """

    name: str
    required: bool = False
    is_list: bool = False
    item_required: bool = False

    def __str__(self) -> str:
        inner = self.name
        if self.is_list:
            inner = f"[{inner}{'!' if self.item_required else ''}]"
        return f"{inner}!" if self.required else inner


@dataclass(frozen=True)
class FieldDefinition:
    """A named, typed field of an object type."""

    name: str
    type: TypeRef

    @property
    def required(self) -> bool:
        return self.type.required

    @property
    def is_list(self) -> bool:
        return self.type.is_list


@dataclass(frozen=True)
class TypeDefinition:
    """A named scalar or object type."""

    name: str
    kind: TypeKind
    fields: tuple[FieldDefinition, ...] = ()

    @property
    def is_scalar(self) -> bool:
        return self.kind is TypeKind.SCALAR

    def field(self, name: str) -> FieldDefinition | None:
        """Look up a field by name."""
        for field_def in self.fields:
            if field_def.name == name:
                return field_def
        return None


class TypeSchema:
    """Immutable table of named types.

    Example:
        >>> schema = load_schema("scalar String type Root { id: String! }")
        >>> schema.resolve_root_type("Root").field("id").required
        True
    """

    def __init__(self, types: Mapping[str, TypeDefinition]) -> None:
        self._types = MappingProxyType(dict(types))

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(self._types)

    def get(self, name: str) -> TypeDefinition | None:
        """Get a type by name, or None if it is not defined."""
        return self._types.get(name)

    def resolve_root_type(self, name: str) -> TypeDefinition:
        """Get the object type validation starts from.

        Raises:
            SchemaDefinitionError: If no object type with that name exists
        """
        type_def = self._types.get(name)
        if type_def is None or type_def.is_scalar:
            raise SchemaDefinitionError(
                f"Root type '{name}' is not an object type of the schema",
                type_name=name,
            )
        return type_def

    @classmethod
    def from_document(cls, document: DocumentNode) -> TypeSchema:
        """Build the type table from a parsed SDL document.

        Raises:
            SchemaDefinitionError: On duplicate, unresolved or unsupported types
        """
        types: dict[str, TypeDefinition] = {}

        for node in document.definitions:
            if isinstance(node, ScalarTypeDefinitionNode):
                type_def = TypeDefinition(node.name.value, TypeKind.SCALAR)
            elif isinstance(node, ObjectTypeDefinitionNode):
                type_def = TypeDefinition(
                    node.name.value, TypeKind.OBJECT, _field_definitions(node)
                )
            else:
                raise SchemaDefinitionError(
                    f"Unsupported definition in schema: {node.kind}"
                )

            if type_def.name in types:
                raise SchemaDefinitionError(
                    f"Type '{type_def.name}' is defined more than once",
                    type_name=type_def.name,
                )
            types[type_def.name] = type_def

        for name in BUILTIN_SCALARS - types.keys():
            types[name] = TypeDefinition(name, TypeKind.SCALAR)

        for type_def in types.values():
            for field_def in type_def.fields:
                if field_def.type.name not in types:
                    raise SchemaDefinitionError(
                        f"Unknown type '{field_def.type.name}' referenced by "
                        f"{type_def.name}.{field_def.name}",
                        type_name=type_def.name,
                    )

        return cls(types)


def _field_definitions(node: ObjectTypeDefinitionNode) -> tuple[FieldDefinition, ...]:
    owner = node.name.value
    fields: list[FieldDefinition] = []
    seen: set[str] = set()
    for field_node in node.fields or ():
        name = field_node.name.value
        if name in seen:
            raise SchemaDefinitionError(
                f"Field '{name}' is defined more than once on type '{owner}'",
                type_name=owner,
            )
        seen.add(name)
        fields.append(FieldDefinition(name, _type_ref(field_node.type, owner, name)))
    return tuple(fields)


def _type_ref(node: TypeNode, owner: str, field_name: str) -> TypeRef:
    required = isinstance(node, NonNullTypeNode)
    if isinstance(node, NonNullTypeNode):
        node = node.type

    if isinstance(node, ListTypeNode):
        item = node.type
        item_required = isinstance(item, NonNullTypeNode)
        if isinstance(item, NonNullTypeNode):
            item = item.type
        if not isinstance(item, NamedTypeNode):
            raise SchemaDefinitionError(
                f"Nested list types are not supported: {owner}.{field_name}",
                type_name=owner,
            )
        return TypeRef(
            item.name.value, required=required, is_list=True, item_required=item_required
        )

    if not isinstance(node, NamedTypeNode):
        raise SchemaDefinitionError(
            f"Unsupported type reference: {owner}.{field_name}", type_name=owner
        )
    return TypeRef(node.name.value, required=required)


def load_schema(source: str | DocumentNode) -> TypeSchema:
    """Load a type schema from SDL text or an already parsed document.

    Args:
        source: GraphQL SDL text, or the DocumentNode produced by graphql-core

    Returns:
        The immutable TypeSchema

    Raises:
        SchemaDefinitionError: If the schema is malformed or inconsistent
    """
    if isinstance(source, str):
        try:
            document = parse(source)
        except GraphQLError as e:
            raise SchemaDefinitionError(f"Invalid schema definition: {e.message}") from e
    else:
        document = source
    return TypeSchema.from_document(document)


@lru_cache(maxsize=8)
def _load_schema_file(path: str) -> TypeSchema:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SchemaDefinitionError(f"Cannot read schema file {path}: {e}") from e
    return load_schema(text)


def default_schema() -> TypeSchema:
    """Get the process-wide manifest schema.

    Uses SUBGRAPH_MANIFEST_SCHEMA when set, otherwise the packaged asset.
    Loaded schemas are cached per path.
    """
    path = os.environ.get("SUBGRAPH_MANIFEST_SCHEMA") or str(_DEFAULT_SCHEMA_PATH)
    return _load_schema_file(path)
