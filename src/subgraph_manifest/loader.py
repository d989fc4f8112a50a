"""
Manifest loader for reading and validating manifest files.

Runs the full pipeline on a YAML manifest:
- Schema validation of the parsed document
- Wrapping into the typed Manifest model
- ABI, contract and event cross-validation
- Handler and network checks

Every error of a stage is reported at once as a single ManifestError.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from subgraph_manifest.errors import ManifestError
from subgraph_manifest.manifest import Manifest
from subgraph_manifest.protocols import variant_for_kind
from subgraph_manifest.schema import ROOT_TYPE, TypeSchema, default_schema
from subgraph_manifest.telemetry import get_logger, log_context
from subgraph_manifest.validation import (
    AbiResolver,
    FileResolver,
    ValidationError,
    cross_validate,
    format_errors,
    validate,
    validate_handlers,
    validate_networks,
)

logger = get_logger("subgraph_manifest.loader")


def make_file_resolver(manifest_path: str | os.PathLike[str]) -> FileResolver:
    """Resolve paths relative to the directory of a manifest file.

    The resolver only joins paths; it never checks that the target exists.
    """
    base = Path(os.path.abspath(manifest_path)).parent

    def resolve_file(maybe_relative: str) -> Path:
        return Path(os.path.normpath(base / maybe_relative))

    return resolve_file


class ManifestLoader:
    """Loads manifest files and validates them end to end.

    Example:
        >>> loader = ManifestLoader()
        >>> manifest = loader.load("subgraph.yaml")
        >>> print(manifest.data_sources[0].name)
    """

    def __init__(
        self,
        schema: TypeSchema | None = None,
        abi_resolver: AbiResolver | None = None,
        strict_networks: bool | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            schema: Type schema to validate against (default: packaged schema)
            abi_resolver: ABI loader override (default: per-protocol loader)
            strict_networks: Treat unknown networks as errors
        """
        self._schema = schema
        self._abi_resolver = abi_resolver
        self._strict_networks = strict_networks

    @property
    def schema(self) -> TypeSchema:
        return default_schema() if self._schema is None else self._schema

    def _read(self, path: Path) -> Any:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            reason = getattr(e, "strerror", None) or e
            raise ManifestError(
                f"Could not read manifest file: {path} ({reason})", filename=str(path)
            ) from e
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ManifestError(
                f"Failed to parse manifest file {path}: {e}", filename=str(path)
            ) from e

    def _fail(self, filename: str, errors: list[ValidationError]) -> ManifestError:
        logger.debug("Manifest validation failed", errors=len(errors))
        return ManifestError(format_errors(filename, errors), tuple(errors), filename=filename)

    def load(self, filename: str | os.PathLike[str]) -> Manifest:
        """Load, validate and wrap a manifest file.

        Raises:
            ManifestError: If the file cannot be read or any check fails
        """
        path = Path(filename)
        display_name = str(filename)
        resolve_file = make_file_resolver(path)

        with log_context(manifest=display_name):
            data = self._read(path)

            errors = validate(data, ROOT_TYPE, self.schema, resolve_file=resolve_file)
            if errors:
                raise self._fail(display_name, errors)

            try:
                manifest = Manifest.from_document(data)
            except PydanticValidationError as e:
                raise self._fail(
                    display_name,
                    [ValidationError(tuple(err["loc"]), err["msg"]) for err in e.errors()],
                ) from e

            errors = cross_validate(manifest, self._abi_resolver, resolve_file=resolve_file)
            # Unknown kinds leave no protocol rules to check against
            if any(variant_for_kind(ds.kind) is None for ds in manifest.data_sources):
                raise self._fail(display_name, errors)

            errors.extend(validate_handlers(manifest))
            networks = validate_networks(manifest, strict=self._strict_networks)
            errors.extend(networks.errors)
            for warning in networks.warnings:
                logger.warning(warning.message, path=warning.format_path())

            if errors:
                raise self._fail(display_name, errors)

            logger.info("Loaded manifest", data_sources=len(manifest.data_sources))
            return manifest


def load_manifest(
    filename: str | os.PathLike[str],
    *,
    schema: TypeSchema | None = None,
    strict_networks: bool | None = None,
) -> Manifest:
    """Load and validate a manifest file; see :class:`ManifestLoader`."""
    return ManifestLoader(schema=schema, strict_networks=strict_networks).load(filename)


def write_manifest(manifest: Manifest | dict[str, Any], filename: str | os.PathLike[str]) -> None:
    """Write a manifest as YAML."""
    data = manifest.to_document() if isinstance(manifest, Manifest) else manifest
    Path(filename).write_text(
        yaml.safe_dump(data, sort_keys=False, indent=2), encoding="utf-8"
    )
