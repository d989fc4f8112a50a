"""Cosmos manifest semantics."""

from __future__ import annotations

from subgraph_manifest.protocols.base import ProtocolSubgraph


class CosmosSubgraph(ProtocolSubgraph):
    def handler_types(self) -> tuple[str, ...]:
        return ("blockHandlers", "eventHandlers", "transactionHandlers")
