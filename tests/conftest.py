"""Root pytest fixtures for subgraph-manifest tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from subgraph_manifest.loader import make_file_resolver

TOKEN_ADDRESS = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
TRANSFER_EVENT = "Transfer(indexed address,indexed address,uint256)"
APPROVAL_EVENT = "Approval(indexed address,indexed address,uint256)"

ERC20_ABI: list[dict[str, Any]] = [
    {
        "type": "event",
        "name": "Transfer",
        "anonymous": False,
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
    },
    {
        "type": "event",
        "name": "Approval",
        "anonymous": False,
        "inputs": [
            {"name": "owner", "type": "address", "indexed": True},
            {"name": "spender", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
    },
    {
        "type": "function",
        "name": "transfer",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "type": "function",
        "name": "balanceOf",
        "stateMutability": "view",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
]


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A subgraph project directory with the files a manifest references."""
    (tmp_path / "schema.graphql").write_text(
        "type Transfer @entity {\n  id: ID!\n}\n", encoding="utf-8"
    )
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "mapping.ts").write_text(
        "export function handleTransfer(): void {}\n", encoding="utf-8"
    )
    (tmp_path / "abis").mkdir()
    (tmp_path / "abis" / "ERC20.json").write_text(json.dumps(ERC20_ABI), encoding="utf-8")
    return tmp_path


@pytest.fixture
def resolve_file(project_dir: Path) -> Callable[[str], Path]:
    """File resolver relative to the project's manifest."""
    return make_file_resolver(project_dir / "subgraph.yaml")


@pytest.fixture
def ethereum_data_source() -> dict[str, Any]:
    """A valid Ethereum data source entry."""
    return {
        "kind": "ethereum/contract",
        "name": "Token",
        "network": "mainnet",
        "source": {"address": TOKEN_ADDRESS, "abi": "ERC20", "startBlock": 8928158},
        "mapping": {
            "kind": "ethereum/events",
            "apiVersion": "0.0.5",
            "language": "wasm/assemblyscript",
            "file": "./src/mapping.ts",
            "entities": ["Transfer"],
            "abis": [{"name": "ERC20", "file": "./abis/ERC20.json"}],
            "eventHandlers": [{"event": TRANSFER_EVENT, "handler": "handleTransfer"}],
        },
    }


@pytest.fixture
def near_data_source() -> dict[str, Any]:
    """A valid NEAR data source entry."""
    return {
        "kind": "near",
        "name": "Receipts",
        "network": "near-mainnet",
        "source": {"account": "app.good-morning.near", "startBlock": 10662188},
        "mapping": {
            "apiVersion": "0.0.5",
            "language": "wasm/assemblyscript",
            "file": "./src/mapping.ts",
            "entities": ["Receipt"],
            "receiptHandlers": [{"handler": "handleReceipt"}],
        },
    }


@pytest.fixture
def make_manifest() -> Callable[..., dict[str, Any]]:
    """Build a manifest document around the given data sources."""

    def build(*data_sources: dict[str, Any], **fields: Any) -> dict[str, Any]:
        document: dict[str, Any] = {
            "specVersion": "0.0.4",
            "schema": {"file": "./schema.graphql"},
            "dataSources": list(data_sources),
        }
        document.update(fields)
        return document

    return build
