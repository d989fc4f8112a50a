"""Ethereum manifest semantics."""

from __future__ import annotations

from subgraph_manifest.protocols.base import ProtocolSubgraph


class EthereumSubgraph(ProtocolSubgraph):
    def handler_types(self) -> tuple[str, ...]:
        return ("blockHandlers", "callHandlers", "eventHandlers")
