"""Scaffolding for new NEAR data sources."""

from __future__ import annotations

from typing import Any

from subgraph_manifest.protocols.base import ManifestScaffold, MappingScaffold
from subgraph_manifest.protocols.ethereum.abi import Abi


class NearManifestScaffold(ManifestScaffold):
    kind = "near"

    def source(self, *, contract: str | None = None, abi: Abi | None = None) -> dict[str, Any]:
        return {"account": contract or "app.good-morning.near", "startBlock": 10662188}

    def mapping(self, *, abi: Abi | None = None) -> dict[str, Any]:
        return {
            "apiVersion": "0.0.5",
            "language": "wasm/assemblyscript",
            "entities": ["ExampleEntity"],
            "receiptHandlers": [{"handler": "handleReceipt"}],
            "file": "./src/mapping.ts",
        }


class NearMappingScaffold(MappingScaffold):
    def generate(self, *, abi: Abi | None = None) -> str:
        return "\n".join(
            [
                'import { near, BigInt } from "@graphprotocol/graph-ts"',
                'import { ExampleEntity } from "../generated/schema"',
                "",
                "export function handleReceipt(receipt: near.ReceiptWithOutcome): void {",
                "  const actions = receipt.receipt.actions",
                "  for (let i = 0; i < actions.length; i++) {",
                "    let entity = ExampleEntity.load(receipt.receipt.id.toBase58())",
                "    if (!entity) {",
                "      entity = new ExampleEntity(receipt.receipt.id.toBase58())",
                "      entity.count = BigInt.fromI32(0)",
                "    }",
                "    entity.count = entity.count + BigInt.fromI32(1)",
                "    entity.save()",
                "  }",
                "}",
                "",
            ]
        )
