"""
Validation layer - schema validation and manifest cross-validation.

This module handles:
- Validating untyped documents against the type schema
- Scalar literal checks (String, File, BigInt, ...)
- ABI, contract and event cross-checks on typed manifests
- Handler and network checks per protocol
- Formatting collected errors into one report
"""

from subgraph_manifest.validation.cross_validator import (
    AbiResolver,
    CrossValidator,
    cross_validate,
    validate_handlers,
    validate_networks,
)
from subgraph_manifest.validation.result import (
    PathSegment,
    ValidationError,
    ValidationResult,
    format_errors,
)
from subgraph_manifest.validation.scalars import (
    SCALAR_CHECKERS,
    FileResolver,
    ScalarChecker,
    checker_for,
    describe_value,
)
from subgraph_manifest.validation.validator import (
    SchemaValidator,
    validate,
    validate_manifest,
)

__all__ = [
    "AbiResolver",
    "CrossValidator",
    "FileResolver",
    "PathSegment",
    "SCALAR_CHECKERS",
    "ScalarChecker",
    "SchemaValidator",
    "ValidationError",
    "ValidationResult",
    "checker_for",
    "cross_validate",
    "describe_value",
    "format_errors",
    "validate",
    "validate_handlers",
    "validate_manifest",
    "validate_networks",
]
