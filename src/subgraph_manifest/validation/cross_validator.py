"""
Cross-validation of a typed manifest against its ABIs and protocol rules.

Runs after schema validation. For every data source whose protocol has the
matching capability it checks, in this order:

1. ABI reference: ``source.abi`` names one of ``mapping.abis``
2. ABI files: every declared ABI loads
3. Contract identifier: ``source.address`` (or ``source.account``) syntax
4. Events: every event handler signature exists in the source ABI

All checks run and their errors are concatenated by data source index, then
check. ABI loader failures are converted to errors here and never propagate.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Any

from subgraph_manifest.errors import SubgraphError, UnknownKindError
from subgraph_manifest.manifest.model import DataSource, Manifest
from subgraph_manifest.protocols import (
    ProtocolVariant,
    all_variants,
    get_abi_class,
    get_contract_class,
    get_subgraph,
    require_variant_for_kind,
    variant_for_kind,
)
from subgraph_manifest.telemetry import get_logger, log_context
from subgraph_manifest.validation.result import PathSegment, ValidationError, ValidationResult
from subgraph_manifest.validation.scalars import FileResolver

logger = get_logger("subgraph_manifest.validation.cross")

AbiResolver = Callable[[str, "str | os.PathLike[str]"], Any]
"""Loads an ABI by name from an absolute path; the result has ``event_signatures()``."""

_STRICT_NETWORKS_ENV = "SUBGRAPH_STRICT_NETWORKS"


def _as_is(maybe_relative: str) -> str:
    return maybe_relative


def _bullet_list(items: list[str]) -> str:
    return "\n  ".join(f"- {item}" for item in sorted(items))


def _supported_kinds() -> list[str]:
    return [kind for variant in all_variants() for kind in variant.kinds]


def _collaborator_message(exc: Exception) -> str:
    if isinstance(exc, SubgraphError):
        return exc.message
    return str(exc)


class CrossValidator:
    """Referential checks across a manifest, its ABIs and its protocols.

    Example:
        >>> validator = CrossValidator(resolve_file=resolver)
        >>> errors = validator.validate(manifest)
    """

    def __init__(
        self,
        abi_resolver: AbiResolver | None = None,
        *,
        resolve_file: FileResolver | None = None,
    ) -> None:
        """Initialize the cross-validator.

        Args:
            abi_resolver: ABI loader; defaults to the data source protocol's loader
            resolve_file: Maps manifest-relative ABI paths to absolute ones
        """
        self._abi_resolver = abi_resolver
        self._resolve_file = resolve_file or _as_is

    def validate(self, manifest: Manifest) -> list[ValidationError]:
        """Run all checks.

        Unknown data source kinds stop validation: one error per offending
        data source is returned and no other check runs.
        """
        variants: list[ProtocolVariant] = []
        unknown: list[ValidationError] = []
        for index, data_source in enumerate(manifest.data_sources):
            try:
                variants.append(require_variant_for_kind(data_source.kind))
            except UnknownKindError as exc:
                unknown.append(
                    ValidationError(
                        ("dataSources", index, "kind"),
                        f"{exc.message}\n  Supported kinds:\n  {_bullet_list(_supported_kinds())}",
                    )
                )
        if unknown:
            logger.warning("Unsupported data source kinds", count=len(unknown))
            return unknown

        errors: list[ValidationError] = []
        for index, (data_source, variant) in enumerate(zip(manifest.data_sources, variants)):
            with log_context(data_source=data_source.name, protocol=variant.name.value):
                errors.extend(self._validate_data_source(index, data_source, variant))

        logger.debug(
            "Cross-validated manifest",
            data_sources=len(manifest.data_sources),
            errors=len(errors),
        )
        return errors

    def _validate_data_source(
        self, index: int, data_source: DataSource, variant: ProtocolVariant
    ) -> list[ValidationError]:
        prefix: tuple[PathSegment, ...] = ("dataSources", index)
        errors: list[ValidationError] = []
        loaded: dict[str, Any] = {}

        if variant.has_abis:
            errors.extend(self._check_abi_reference(prefix, data_source))
            abi_errors, loaded = self._load_abis(prefix, data_source, variant)
            errors.extend(abi_errors)

        if variant.has_contract:
            errors.extend(self._check_contract(prefix, data_source, variant))

        if variant.has_events:
            errors.extend(self._check_events(prefix, data_source, loaded))

        return errors

    def _check_abi_reference(
        self, prefix: tuple[PathSegment, ...], data_source: DataSource
    ) -> list[ValidationError]:
        abi_name = data_source.source.abi
        abi_names = data_source.mapping.abi_names()
        if abi_name in abi_names:
            return []
        if abi_name is None:
            problem = "No ABI name set in source > abi."
        else:
            problem = f"ABI name '{abi_name}' not found in mapping > abis."
        return [
            ValidationError(
                (*prefix, "source", "abi"),
                f"{problem}\n"
                f"  Available ABIs:\n  {_bullet_list(abi_names)}",
            )
        ]

    def _load_abis(
        self,
        prefix: tuple[PathSegment, ...],
        data_source: DataSource,
        variant: ProtocolVariant,
    ) -> tuple[list[ValidationError], dict[str, Any]]:
        load = self._abi_resolver or get_abi_class(variant).load
        errors: list[ValidationError] = []
        loaded: dict[str, Any] = {}

        for abi_index, abi in enumerate(data_source.mapping.abis):
            try:
                result = load(abi.name, self._resolve_file(abi.file))
            except Exception as exc:
                logger.warning("Failed to load ABI", abi=abi.name, error=str(exc))
                errors.append(
                    ValidationError(
                        (*prefix, "mapping", "abis", abi_index, "file"),
                        _collaborator_message(exc),
                    )
                )
                continue
            loaded.setdefault(abi.name, result)

        return errors, loaded

    def _check_contract(
        self,
        prefix: tuple[PathSegment, ...],
        data_source: DataSource,
        variant: ProtocolVariant,
    ) -> list[ValidationError]:
        contract_class = get_contract_class(variant)
        identifier = getattr(data_source.source, contract_class.identifier_name, None)
        if identifier is None:
            return []
        outcome = contract_class(identifier).validate()
        if outcome.valid:
            return []
        return [
            ValidationError(
                (*prefix, "source", contract_class.identifier_name),
                outcome.error or f"Invalid {contract_class.identifier_name}: {identifier}",
            )
        ]

    def _check_events(
        self,
        prefix: tuple[PathSegment, ...],
        data_source: DataSource,
        loaded: dict[str, Any],
    ) -> list[ValidationError]:
        abi_name = data_source.source.abi
        abi = loaded.get(abi_name) if abi_name is not None else None
        if abi is None:
            # Unresolvable or unloadable ABI, already reported above
            return []

        signatures = list(abi.event_signatures())
        available = set(signatures)
        errors: list[ValidationError] = []
        for handler_index, handler in enumerate(data_source.mapping.event_handlers):
            if handler.event in available:
                continue
            errors.append(
                ValidationError(
                    (*prefix, "mapping", "eventHandlers", handler_index, "event"),
                    f"Event with signature '{handler.event}' not present in ABI '{abi_name}'.\n"
                    f"  Available events:\n  {_bullet_list(signatures)}",
                )
            )
        return errors


def cross_validate(
    manifest: Manifest,
    abi_resolver: AbiResolver | None = None,
    *,
    resolve_file: FileResolver | None = None,
) -> list[ValidationError]:
    """Cross-validate a manifest; see :class:`CrossValidator`."""
    return CrossValidator(abi_resolver, resolve_file=resolve_file).validate(manifest)


def validate_handlers(manifest: Manifest) -> list[ValidationError]:
    """Report data sources whose mapping declares no handler of their protocol.

    Data sources with unsupported kinds are skipped.
    """
    errors: list[ValidationError] = []
    for index, data_source in enumerate(manifest.data_sources):
        variant = variant_for_kind(data_source.kind)
        if variant is None:
            continue
        subgraph = get_subgraph(variant)
        if subgraph.has_handlers(data_source.mapping):
            continue
        errors.append(
            ValidationError(
                ("dataSources", index, "mapping"),
                "Mapping has no handlers.\n"
                f"  Declare at least one of: {', '.join(subgraph.handler_types())}",
            )
        )
    return errors


def validate_networks(manifest: Manifest, strict: bool | None = None) -> ValidationResult:
    """Check every data source network against its protocol.

    Unknown networks are warnings, or errors in strict mode.

    Args:
        manifest: Manifest to check
        strict: Report errors instead of warnings
            (uses SUBGRAPH_STRICT_NETWORKS env var if None)
    """
    if strict is None:
        strict = os.environ.get(_STRICT_NETWORKS_ENV, "").lower() in ("1", "true", "yes")

    result = ValidationResult()
    for index, data_source in enumerate(manifest.data_sources):
        variant = variant_for_kind(data_source.kind)
        if variant is None or data_source.network is None:
            continue
        if variant.is_valid_network(data_source.network):
            continue
        message = (
            f"Network '{data_source.network}' is not a known {variant.display_name} network.\n"
            f"  Available networks:\n  {_bullet_list(list(variant.networks))}"
        )
        path = ("dataSources", index, "network")
        if strict:
            result.add_error(path, message)
        else:
            result.add_warning(path, message)
    return result
