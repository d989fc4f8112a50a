"""Scaffolding for new Cosmos data sources."""

from __future__ import annotations

from typing import Any

from subgraph_manifest.protocols.base import ManifestScaffold, MappingScaffold
from subgraph_manifest.protocols.ethereum.abi import Abi


class CosmosManifestScaffold(ManifestScaffold):
    kind = "cosmos"

    def source(self, *, contract: str | None = None, abi: Abi | None = None) -> dict[str, Any]:
        return {"startBlock": 9200001}

    def mapping(self, *, abi: Abi | None = None) -> dict[str, Any]:
        return {
            "apiVersion": "0.0.5",
            "language": "wasm/assemblyscript",
            "entities": ["ExampleEntity"],
            "blockHandlers": [{"handler": "handleBlock"}],
            "file": "./src/mapping.ts",
        }


class CosmosMappingScaffold(MappingScaffold):
    def generate(self, *, abi: Abi | None = None) -> str:
        return "\n".join(
            [
                'import { cosmos, BigInt } from "@graphprotocol/graph-ts"',
                'import { ExampleEntity } from "../generated/schema"',
                "",
                "export function handleBlock(block: cosmos.Block): void {",
                "  const id = block.header.hash.toHexString()",
                "  let entity = new ExampleEntity(id)",
                "  entity.count = BigInt.fromI32(1)",
                "  entity.save()",
                "}",
                "",
            ]
        )
