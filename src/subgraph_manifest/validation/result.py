"""
Validation records and report formatting.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

PathSegment = str | int


@dataclass(frozen=True)
class ValidationError:
    """One defect in a manifest, addressed by its path from the document root."""

    path: tuple[PathSegment, ...]
    message: str

    def format_path(self) -> str:
        """Render the path as ``a > b > 0``, or ``/`` for the root."""
        if not self.path:
            return "/"
        return " > ".join(str(segment) for segment in self.path)

    def __str__(self) -> str:
        return f"{self.format_path()}: {self.message}"


@dataclass
class ValidationResult:
    """Errors plus non-blocking warnings of a validation step."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid

    def add_error(self, path: tuple[PathSegment, ...], message: str) -> None:
        """Add an error."""
        self.errors.append(ValidationError(path, message))

    def add_warning(self, path: tuple[PathSegment, ...], message: str) -> None:
        """Add a warning."""
        self.warnings.append(ValidationError(path, message))

    def merge(self, other: ValidationResult) -> None:
        """Append another result, keeping encounter order."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


def format_errors(filename: str, errors: Iterable[ValidationError]) -> str:
    """Combine errors into the report shown to users.

    Example:
        Error in subgraph.yaml:

          Path: specVersion
          No value provided
    """
    message = f"Error in {filename}:"
    for error in errors:
        message += f"\n\n  Path: {error.format_path()}\n  {error.message}"
    return message
