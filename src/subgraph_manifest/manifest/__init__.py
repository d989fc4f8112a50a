"""
Typed manifest models, built from documents that passed schema validation.
"""

from subgraph_manifest.manifest.model import (
    BlockFilter,
    BlockHandler,
    CallHandler,
    DataSource,
    DataSourceMapping,
    DataSourceSource,
    DataSourceTemplate,
    EventHandler,
    GraftSource,
    Manifest,
    MappingAbi,
    ReceiptHandler,
    SchemaRef,
    TemplateSource,
    TransactionHandler,
)

__all__ = [
    "BlockFilter",
    "BlockHandler",
    "CallHandler",
    "DataSource",
    "DataSourceMapping",
    "DataSourceSource",
    "DataSourceTemplate",
    "EventHandler",
    "GraftSource",
    "Manifest",
    "MappingAbi",
    "ReceiptHandler",
    "SchemaRef",
    "TemplateSource",
    "TransactionHandler",
]
