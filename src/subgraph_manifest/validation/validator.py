"""
Schema validator for untyped manifest documents.

Walks a parsed document (nested mappings, lists and scalars) alongside the
expected type of every node and collects path-addressed errors. Bad document
content never raises; only a broken call such as an unknown root type does.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from subgraph_manifest.errors import SchemaDefinitionError
from subgraph_manifest.schema import ROOT_TYPE, TypeDefinition, TypeRef, TypeSchema, default_schema
from subgraph_manifest.telemetry import get_logger
from subgraph_manifest.validation.result import PathSegment, ValidationError
from subgraph_manifest.validation.scalars import FileResolver, checker_for, describe_value

logger = get_logger("subgraph_manifest.validation")

NodePath = tuple[PathSegment, ...]


def _as_is(maybe_relative: str) -> str:
    return maybe_relative


class SchemaValidator:
    """Validates documents against one TypeSchema.

    Example:
        >>> validator = SchemaValidator(default_schema(), resolve_file=resolver)
        >>> errors = validator.validate(data, "SubgraphManifest")
        >>> for error in errors:
        ...     print(error.format_path(), error.message)
    """

    def __init__(
        self,
        schema: TypeSchema,
        resolve_file: FileResolver | None = None,
    ) -> None:
        """Initialize the validator.

        Args:
            schema: Type table to validate against
            resolve_file: Maps manifest-relative paths for ``File`` scalars
        """
        self._schema = schema
        self._resolve_file = resolve_file or _as_is

    def validate(
        self, document: Any, root_type: TypeDefinition | str
    ) -> list[ValidationError]:
        """Validate a document starting from ``root_type``.

        Returns:
            Errors in document order; empty when the document is valid

        Raises:
            SchemaDefinitionError: If ``root_type`` is not an object type, or the
                schema references a type it does not define
        """
        if isinstance(root_type, str):
            root_type = self._schema.resolve_root_type(root_type)
        errors = self._validate_object(document, root_type, ())
        logger.debug(
            "Validated document against schema",
            root_type=root_type.name,
            errors=len(errors),
        )
        return errors

    def _validate_field(self, value: Any, type_ref: TypeRef, path: NodePath) -> list[ValidationError]:
        if value is None:
            if type_ref.required:
                return [ValidationError(path, "No value provided")]
            return []

        if not type_ref.is_list:
            return self._validate_value(value, type_ref.name, path)

        if not isinstance(value, list | tuple):
            return [ValidationError(path, f"Expected list, found {describe_value(value)}")]

        errors: list[ValidationError] = []
        for index, item in enumerate(value):
            item_path = (*path, index)
            if item is None:
                if type_ref.item_required:
                    errors.append(ValidationError(item_path, "No value provided"))
                continue
            errors.extend(self._validate_value(item, type_ref.name, item_path))
        return errors

    def _validate_value(self, value: Any, type_name: str, path: NodePath) -> list[ValidationError]:
        type_def = self._schema.get(type_name)
        if type_def is None:
            raise SchemaDefinitionError(
                f"Unknown type '{type_name}' referenced at {ValidationError(path, '').format_path()}",
                type_name=type_name,
            )

        if type_def.is_scalar:
            message = checker_for(type_name)(value, self._resolve_file)
            return [] if message is None else [ValidationError(path, message)]
        return self._validate_object(value, type_def, path)

    def _validate_object(
        self, value: Any, type_def: TypeDefinition, path: NodePath
    ) -> list[ValidationError]:
        if not isinstance(value, Mapping):
            return [ValidationError(path, f"Expected map, found {describe_value(value)}")]

        # Keys without a field definition are ignored
        errors: list[ValidationError] = []
        for field_def in type_def.fields:
            errors.extend(
                self._validate_field(
                    value.get(field_def.name), field_def.type, (*path, field_def.name)
                )
            )
        return errors


def validate(
    document: Any,
    root_type: TypeDefinition | str,
    schema: TypeSchema,
    *,
    resolve_file: FileResolver | None = None,
) -> list[ValidationError]:
    """Validate a document against ``schema`` starting at ``root_type``.

    Args:
        document: Parsed document tree
        root_type: Root object type, or its name
        schema: Type table
        resolve_file: Maps manifest-relative paths for ``File`` scalars

    Returns:
        All errors found, in document order
    """
    return SchemaValidator(schema, resolve_file=resolve_file).validate(document, root_type)


def validate_manifest(
    document: Any,
    *,
    resolve_file: FileResolver | None = None,
    schema: TypeSchema | None = None,
) -> list[ValidationError]:
    """Validate a manifest document against the manifest schema."""
    if schema is None:
        schema = default_schema()
    return validate(document, ROOT_TYPE, schema, resolve_file=resolve_file)
