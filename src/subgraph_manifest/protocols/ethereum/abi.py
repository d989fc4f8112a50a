"""
Ethereum contract ABI loading.

An ABI file is either a bare JSON array of ABI entries or a build artifact
object holding that array under ``abi``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from subgraph_manifest.errors import AbiError


class AbiParameter(BaseModel):
    """Input or output parameter of an ABI entry."""

    model_config = ConfigDict(extra="allow")

    name: str = ""
    type: str
    indexed: bool = False
    components: list[AbiParameter] = Field(default_factory=list)

    def signature_type(self) -> str:
        """Canonical type, with tuples expanded to their components."""
        if self.type.startswith("tuple"):
            inner = ",".join(c.signature_type() for c in self.components)
            return f"({inner}){self.type[len('tuple'):]}"
        return self.type


class AbiEntry(BaseModel):
    """One function, event, constructor, fallback or error of an ABI."""

    model_config = ConfigDict(extra="allow")

    type: str = "function"
    name: str | None = None
    inputs: list[AbiParameter] = Field(default_factory=list)
    outputs: list[AbiParameter] = Field(default_factory=list)
    anonymous: bool = False


_ENTRIES = TypeAdapter(list[AbiEntry])


class Abi:
    """A named, parsed ABI.

    Example:
        >>> abi = Abi.load("ERC20", "abis/ERC20.json")
        >>> "Transfer(indexed address,indexed address,uint256)" in abi.event_signatures()
        True
    """

    def __init__(
        self, name: str, entries: list[AbiEntry], file: str | None = None
    ) -> None:
        self.name = name
        self.entries = entries
        self.file = file

    def __repr__(self) -> str:
        return f"Abi(name={self.name!r}, entries={len(self.entries)})"

    @classmethod
    def from_json(cls, name: str, data: Any, file: str | None = None) -> Abi:
        """Build an ABI from parsed JSON.

        Raises:
            AbiError: If the data holds no valid ABI
        """
        if isinstance(data, dict):
            data = data.get("abi")
        label = file or name
        if not isinstance(data, list):
            raise AbiError(f"No valid ABI in file: {label}", abi_name=name, file=file)
        try:
            entries = _ENTRIES.validate_python(data)
        except PydanticValidationError as e:
            raise AbiError(
                f"No valid ABI in file: {label}", abi_name=name, file=file, cause=e
            ) from e
        return cls(name, entries, file=file)

    @classmethod
    def load(cls, name: str, file: str | os.PathLike[str]) -> Abi:
        """Load an ABI from a JSON file.

        Raises:
            AbiError: If the file cannot be read or holds no valid ABI
        """
        path = Path(file)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            reason = getattr(e, "strerror", None) or e
            raise AbiError(
                f"Could not read ABI file: {path} ({reason})",
                abi_name=name,
                file=str(path),
                cause=e,
            ) from e
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise AbiError(
                f"ABI file is not valid JSON: {path} ({e.msg} at line {e.lineno})",
                abi_name=name,
                file=str(path),
                cause=e,
            ) from e
        return cls.from_json(name, data, file=str(path))

    @property
    def events(self) -> list[AbiEntry]:
        return [entry for entry in self.entries if entry.type == "event"]

    @property
    def functions(self) -> list[AbiEntry]:
        return [entry for entry in self.entries if entry.type == "function"]

    def event_signatures(self) -> list[str]:
        """Event signatures as written in manifests.

        Indexed parameters are prefixed with ``indexed``, e.g.
        ``Transfer(indexed address,indexed address,uint256)``.
        """
        return [
            f"{event.name}("
            + ",".join(
                f"indexed {p.signature_type()}" if p.indexed else p.signature_type()
                for p in event.inputs
            )
            + ")"
            for event in self.events
        ]

    def function_signatures(self) -> list[str]:
        """Function signatures, e.g. ``transfer(address,uint256)``."""
        return [
            f"{function.name}({','.join(p.signature_type() for p in function.inputs)})"
            for function in self.functions
        ]
