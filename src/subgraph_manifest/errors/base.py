"""
Base error classes for subgraph-manifest.

Provides a layered error hierarchy:
- SubgraphError: Base class for all library errors
- SchemaDefinitionError: Broken type-schema asset (fatal at startup)
- ProtocolError: Unknown protocol or unsupported protocol capability
- UnknownKindError: Data source kind that matches no protocol
- AbiError: ABI file that cannot be loaded or parsed
- ManifestError: Combined report of every defect found in a manifest

Data-level defects in a user manifest are *not* raised one by one; they are
collected as ``ValidationError`` records (see ``subgraph_manifest.validation``)
and only raised in bulk by the loader as a ``ManifestError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from subgraph_manifest.validation.result import ValidationError


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    field_path: str | None = None
    """Path to the problematic field (e.g., 'dataSources > 0 > kind')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'schema', 'protocol', 'abi')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class SubgraphError(Exception):
    """Base class for all subgraph-manifest errors.

    Attributes:
        message: Human-readable error message
        context: Optional structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> SubgraphError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class SchemaDefinitionError(SubgraphError):
    """The type-schema asset is malformed or internally inconsistent.

    Raised when:
    - The schema text is not valid GraphQL SDL
    - Two definitions share a name
    - A field references a type that is never defined
    - A definition kind or type shape is not supported
    - A requested root type does not exist
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        type_name: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="schema")
        if type_name:
            ctx.details["type_name"] = type_name
        super().__init__(message, ctx)
        self.type_name = type_name


class ProtocolError(SubgraphError):
    """Error selecting or using a protocol variant.

    Raised when:
    - A protocol name is not part of the registry
    - A protocol-scoped factory is asked for a capability the
      protocol does not have (e.g. templates on NEAR)
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        protocol: str | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="protocol")
        if protocol:
            ctx.details["protocol"] = protocol
        super().__init__(message, ctx)
        self.protocol = protocol


class UnknownKindError(ProtocolError):
    """A data source kind matches no alias of any protocol."""

    def __init__(self, kind: Any, context: ErrorContext | None = None) -> None:
        ctx = context or ErrorContext(source="protocol")
        ctx.details["kind"] = kind
        super().__init__(f"Unknown data source kind: {kind!r}", ctx)
        self.kind = kind


class AbiError(SubgraphError):
    """An ABI file could not be read or does not contain a valid ABI."""

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        abi_name: str | None = None,
        file: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="abi")
        if abi_name:
            ctx.details["abi_name"] = abi_name
        if file:
            ctx.details["file"] = file
        super().__init__(message, ctx)
        self.abi_name = abi_name
        self.file = file
        self.__cause__ = cause


class ManifestError(SubgraphError):
    """A manifest failed validation.

    The message is the full combined report; ``errors`` keeps the
    individual records for programmatic access.
    """

    def __init__(
        self,
        message: str,
        errors: tuple[ValidationError, ...] = (),
        *,
        filename: str | None = None,
    ) -> None:
        # The combined report is already self-describing.
        super().__init__(message, ErrorContext())
        self.errors = errors
        self.filename = filename
