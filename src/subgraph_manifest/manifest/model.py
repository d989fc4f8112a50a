"""
Typed manifest models.

These Pydantic models mirror the manifest schema. A document is wrapped in
them only after it passed schema validation; cross-validation reads them
and never mutates them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ManifestModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)


class SchemaRef(_ManifestModel):
    """Reference to the GraphQL entity schema."""

    file: str = Field(description="Path to the schema file")


class GraftSource(_ManifestModel):
    """Graft base deployment."""

    base: str = Field(description="Deployment ID to graft onto")
    block: int = Field(description="Block to graft at")


class MappingAbi(_ManifestModel):
    """ABI declared by a mapping."""

    name: str
    file: str


class EventHandler(_ManifestModel):
    """Handler for a contract event."""

    event: str = Field(description="Event signature, e.g. Transfer(address,address,uint256)")
    handler: str
    topic0: str | None = None


class CallHandler(_ManifestModel):
    """Handler for a contract call."""

    function: str
    handler: str


class BlockFilter(_ManifestModel):
    kind: str


class BlockHandler(_ManifestModel):
    """Handler invoked per block."""

    handler: str
    filter: BlockFilter | None = None


class ReceiptHandler(_ManifestModel):
    handler: str


class TransactionHandler(_ManifestModel):
    handler: str


class DataSourceSource(_ManifestModel):
    """Where a data source reads from."""

    address: str | None = Field(default=None, description="Contract address")
    account: str | None = Field(default=None, description="Account ID")
    abi: str | None = Field(default=None, description="Name of the source ABI")
    start_block: int | None = Field(default=None, alias="startBlock")


class DataSourceMapping(_ManifestModel):
    """How a data source's input is mapped to entities."""

    kind: str | None = None
    api_version: str = Field(alias="apiVersion")
    language: str
    file: str
    entities: list[str] = Field(default_factory=list)
    abis: list[MappingAbi] = Field(default_factory=list)
    block_handlers: list[BlockHandler] = Field(default_factory=list, alias="blockHandlers")
    call_handlers: list[CallHandler] = Field(default_factory=list, alias="callHandlers")
    event_handlers: list[EventHandler] = Field(default_factory=list, alias="eventHandlers")
    receipt_handlers: list[ReceiptHandler] = Field(
        default_factory=list, alias="receiptHandlers"
    )
    transaction_handlers: list[TransactionHandler] = Field(
        default_factory=list, alias="transactionHandlers"
    )

    def handlers(self, handler_type: str) -> list[Any]:
        """Get a handler list by its manifest key, e.g. ``eventHandlers``."""
        for name, info in type(self).model_fields.items():
            if info.alias == handler_type:
                return list(getattr(self, name))
        raise KeyError(handler_type)

    def abi_names(self) -> list[str]:
        return [abi.name for abi in self.abis]


class DataSource(_ManifestModel):
    """One data source of a manifest."""

    kind: str
    name: str
    network: str | None = None
    source: DataSourceSource
    mapping: DataSourceMapping


class TemplateSource(_ManifestModel):
    abi: str | None = None


class DataSourceTemplate(_ManifestModel):
    """A data source created dynamically at runtime."""

    kind: str
    name: str
    network: str | None = None
    source: TemplateSource
    mapping: DataSourceMapping


class Manifest(_ManifestModel):
    """A schema-validated subgraph manifest."""

    spec_version: str = Field(alias="specVersion")
    features: list[str] = Field(default_factory=list)
    graphql_schema: SchemaRef = Field(alias="schema")
    description: str | None = None
    repository: str | None = None
    graft: GraftSource | None = None
    data_sources: list[DataSource] = Field(default_factory=list, alias="dataSources")
    templates: list[DataSourceTemplate] = Field(default_factory=list)

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> Manifest:
        """Wrap a parsed document that passed schema validation."""
        return cls.model_validate(data)

    def to_document(self) -> dict[str, Any]:
        """Dump back to the manifest's key layout, keeping only set keys."""
        return self.model_dump(by_alias=True, exclude_unset=True)
