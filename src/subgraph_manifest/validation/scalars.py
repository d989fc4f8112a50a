"""
Literal checks for scalar types.

A checker receives the document value and the caller's file resolver and
returns an error message, or None when the value is acceptable. Checkers
never recurse into the value.
"""

from __future__ import annotations

import json
import os
import re
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

FileResolver = Callable[[str], "str | os.PathLike[str]"]
ScalarChecker = Callable[[Any, FileResolver], "str | None"]

_BIGINT_PATTERN = re.compile(r"-?[0-9]+")


def describe_value(value: Any) -> str:
    """Describe a document value for error messages, e.g. ``number: 42``."""
    if value is None:
        kind = "null"
    elif isinstance(value, bool):
        kind = "boolean"
    elif isinstance(value, int | float):
        kind = "number"
    elif isinstance(value, str):
        kind = "string"
    elif isinstance(value, Mapping):
        kind = "map"
    elif isinstance(value, list | tuple):
        kind = "list"
    else:
        kind = type(value).__name__
    return f"{kind}: {json.dumps(value, default=str)}"


def check_string(value: Any, resolve_file: FileResolver) -> str | None:
    if isinstance(value, str):
        return None
    return f"Expected string, found {describe_value(value)}"


def check_file(value: Any, resolve_file: FileResolver) -> str | None:
    if not isinstance(value, str):
        return f"Expected filename, found {describe_value(value)}"
    try:
        exists = Path(resolve_file(value)).exists()
    except Exception as e:
        # Resolver failures are reported, never raised
        return f"Cannot resolve file {value}: {e}"
    if not exists:
        return f"File does not exist: {value}"
    return None


def check_bigint(value: Any, resolve_file: FileResolver) -> str | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return None
    if isinstance(value, str) and _BIGINT_PATTERN.fullmatch(value):
        return None
    return f"Expected BigInt, found {describe_value(value)}"


def check_int(value: Any, resolve_file: FileResolver) -> str | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return None
    return f"Expected integer, found {describe_value(value)}"


def check_boolean(value: Any, resolve_file: FileResolver) -> str | None:
    if isinstance(value, bool):
        return None
    return f"Expected true or false, found {describe_value(value)}"


def check_any_scalar(value: Any, resolve_file: FileResolver) -> str | None:
    """Fallback for declared scalars without a dedicated check."""
    if isinstance(value, Mapping | list | tuple):
        return f"Expected scalar value, found {describe_value(value)}"
    return None


SCALAR_CHECKERS: Mapping[str, ScalarChecker] = {
    "String": check_string,
    "File": check_file,
    "BigInt": check_bigint,
    "Int": check_int,
    "Boolean": check_boolean,
}


def checker_for(type_name: str) -> ScalarChecker:
    """Get the checker for a scalar type name."""
    return SCALAR_CHECKERS.get(type_name, check_any_scalar)
