"""Scaffolding for new Ethereum data sources."""

from __future__ import annotations

from typing import Any

from subgraph_manifest.protocols.base import ManifestScaffold, MappingScaffold
from subgraph_manifest.protocols.ethereum.abi import Abi

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
DEFAULT_CONTRACT_NAME = "Contract"


def _event_names(abi: Abi | None) -> list[str]:
    if abi is None:
        return []
    # Overloaded events share one handler
    return list(dict.fromkeys(event.name for event in abi.events if event.name))


class EthereumManifestScaffold(ManifestScaffold):
    kind = "ethereum/contract"

    def source(self, *, contract: str | None = None, abi: Abi | None = None) -> dict[str, Any]:
        return {
            "address": contract or ZERO_ADDRESS,
            "abi": abi.name if abi else DEFAULT_CONTRACT_NAME,
        }

    def mapping(self, *, abi: Abi | None = None) -> dict[str, Any]:
        abi_name = abi.name if abi else DEFAULT_CONTRACT_NAME
        events = abi.event_signatures() if abi else []
        return {
            "kind": "ethereum/events",
            "apiVersion": "0.0.5",
            "language": "wasm/assemblyscript",
            "entities": _event_names(abi) or ["ExampleEntity"],
            "abis": [{"name": abi_name, "file": f"./abis/{abi_name}.json"}],
            "eventHandlers": [
                {"event": signature, "handler": f"handle{signature.split('(', 1)[0]}"}
                for signature in events
            ],
            "file": "./src/mapping.ts",
        }


class EthereumMappingScaffold(MappingScaffold):
    def generate(self, *, abi: Abi | None = None) -> str:
        contract_name = abi.name if abi else DEFAULT_CONTRACT_NAME
        events = _event_names(abi)

        lines = ['import { BigInt } from "@graphprotocol/graph-ts"']
        if events:
            lines.append(
                f"import {{ {', '.join(events)} }} from "
                f'"../generated/{contract_name}/{contract_name}"'
            )
        lines.append('import { ExampleEntity } from "../generated/schema"')

        for event in events:
            lines.extend(
                [
                    "",
                    f"export function handle{event}(event: {event}): void {{",
                    "  let entity = ExampleEntity.load(event.transaction.from.toHex())",
                    "  if (!entity) {",
                    "    entity = new ExampleEntity(event.transaction.from.toHex())",
                    "    entity.count = BigInt.fromI32(0)",
                    "  }",
                    "  entity.count = entity.count + BigInt.fromI32(1)",
                    "  entity.save()",
                    "}",
                ]
            )
        return "\n".join(lines) + "\n"
