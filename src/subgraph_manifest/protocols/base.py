"""
Abstract collaborators every protocol provides.

Concrete classes live in the per-protocol sub-packages; the factories in
``subgraph_manifest.protocols`` select them by protocol name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

import yaml

if TYPE_CHECKING:
    from subgraph_manifest.manifest.model import DataSourceMapping
    from subgraph_manifest.protocols.ethereum.abi import Abi
    from subgraph_manifest.protocols.registry import ProtocolVariant


@dataclass(frozen=True)
class ContractValidation:
    """Outcome of validating a contract identifier."""

    valid: bool
    error: str | None = None


class Contract(ABC):
    """Identifier of the on-chain entity a data source is bound to."""

    identifier_name: ClassVar[str]
    """Key under ``source`` that holds the identifier (``address``, ``account``)"""

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier

    @abstractmethod
    def validate(self) -> ContractValidation:
        """Check the identifier's syntax."""


class ProtocolSubgraph(ABC):
    """Protocol-specific manifest semantics."""

    def __init__(self, protocol: ProtocolVariant) -> None:
        self.protocol = protocol

    @abstractmethod
    def handler_types(self) -> tuple[str, ...]:
        """Mapping keys that hold handler lists for this protocol."""

    def has_handlers(self, mapping: DataSourceMapping) -> bool:
        """Whether a mapping declares at least one handler."""
        return any(mapping.handlers(handler_type) for handler_type in self.handler_types())


class ManifestScaffold(ABC):
    """Default manifest sections for a new data source."""

    kind: ClassVar[str]

    @abstractmethod
    def source(self, *, contract: str | None = None, abi: Abi | None = None) -> dict[str, Any]:
        """The ``source`` section."""

    @abstractmethod
    def mapping(self, *, abi: Abi | None = None) -> dict[str, Any]:
        """The ``mapping`` section."""

    def data_source(
        self,
        *,
        name: str,
        network: str,
        contract: str | None = None,
        abi: Abi | None = None,
    ) -> dict[str, Any]:
        """A complete data source entry."""
        return {
            "kind": self.kind,
            "name": name,
            "network": network,
            "source": self.source(contract=contract, abi=abi),
            "mapping": self.mapping(abi=abi),
        }

    def render(self, **kwargs: Any) -> str:
        """Render :meth:`data_source` as a YAML list item."""
        return yaml.safe_dump([self.data_source(**kwargs)], sort_keys=False, indent=2)


class MappingScaffold(ABC):
    """Source of the default ``src/mapping.ts`` for a new data source."""

    @abstractmethod
    def generate(self, *, abi: Abi | None = None) -> str:
        """Generate the AssemblyScript mapping module."""
