"""Tests for protocol-scoped factories."""

import pytest
import yaml

from subgraph_manifest.errors import ProtocolError
from subgraph_manifest.manifest import DataSourceMapping
from subgraph_manifest.protocols import (
    ProtocolName,
    get_abi_class,
    get_contract_class,
    get_manifest_scaffold,
    get_mapping_scaffold,
    get_subgraph,
    get_template_codegen,
    get_variant,
)
from subgraph_manifest.protocols.ethereum import (
    Abi,
    EthereumContract,
    EthereumTemplateCodeGen,
)
from subgraph_manifest.protocols.near import NearContract

ERC20_EVENTS = [
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256"},
        ],
    },
]


class TestCapabilityFactories:
    """Tests for factories gated by capabilities."""

    def test_abi_class(self) -> None:
        """Test Ethereum provides an ABI loader."""
        assert get_abi_class("ethereum") is Abi

    @pytest.mark.parametrize("protocol", ["near", "cosmos"])
    def test_abi_class_unsupported(self, protocol) -> None:
        """Test protocols without ABIs fail loudly."""
        with pytest.raises(ProtocolError) as exc_info:
            get_abi_class(protocol)
        assert exc_info.value.message == (
            f"ABIs are not supported for data sources with kind '{protocol}'"
        )

    def test_contract_classes(self) -> None:
        """Test contract validators per protocol."""
        assert get_contract_class(ProtocolName.ETHEREUM) is EthereumContract
        assert get_contract_class(get_variant("near")) is NearContract

    def test_contract_class_unsupported(self) -> None:
        """Test Cosmos has no contracts."""
        with pytest.raises(ProtocolError, match="Contracts are not supported"):
            get_contract_class("cosmos")

    def test_template_codegen(self) -> None:
        """Test Ethereum provides a template code generator."""
        template = {
            "kind": "ethereum",
            "name": "Pair",
            "source": {"abi": "Pair"},
            "mapping": _mapping(),
        }
        codegen = get_template_codegen("ethereum", template)
        assert isinstance(codegen, EthereumTemplateCodeGen)
        assert codegen.name == "Pair"

    @pytest.mark.parametrize("protocol", ["near", "cosmos"])
    def test_template_codegen_unsupported(self, protocol) -> None:
        """Test requesting templates where there are none is an error."""
        with pytest.raises(ProtocolError, match="Template data sources are not supported"):
            get_template_codegen(protocol, {})

    def test_unknown_protocol(self) -> None:
        """Test factories reject unknown protocol names."""
        with pytest.raises(ProtocolError):
            get_subgraph("arweave")


def _mapping(**handlers) -> dict:
    return {
        "apiVersion": "0.0.5",
        "language": "wasm/assemblyscript",
        "file": "./src/mapping.ts",
        "entities": [],
        **handlers,
    }


class TestSubgraphs:
    """Tests for protocol manifest semantics."""

    def test_handler_types(self) -> None:
        """Test handler keys per protocol."""
        assert get_subgraph("ethereum").handler_types() == (
            "blockHandlers",
            "callHandlers",
            "eventHandlers",
        )
        assert get_subgraph("near").handler_types() == ("blockHandlers", "receiptHandlers")
        assert get_subgraph("cosmos").handler_types() == (
            "blockHandlers",
            "eventHandlers",
            "transactionHandlers",
        )

    def test_has_handlers(self) -> None:
        """Test handler presence only counts the protocol's own keys."""
        mapping = DataSourceMapping.model_validate(
            _mapping(receiptHandlers=[{"handler": "handleReceipt"}])
        )
        assert get_subgraph("near").has_handlers(mapping)
        assert not get_subgraph("ethereum").has_handlers(mapping)

    def test_subgraph_keeps_variant(self) -> None:
        """Test the semantics object knows its protocol."""
        assert get_subgraph("cosmos").protocol is get_variant("cosmos")


class TestScaffolds:
    """Tests for manifest and mapping scaffolds."""

    def test_ethereum_manifest_scaffold(self) -> None:
        """Test default Ethereum sections from an ABI."""
        abi = Abi.from_json("Token", ERC20_EVENTS)
        scaffold = get_manifest_scaffold("ethereum")
        data_source = scaffold.data_source(name="Token", network="mainnet", abi=abi)
        assert data_source["kind"] == "ethereum/contract"
        assert data_source["source"] == {
            "address": "0x0000000000000000000000000000000000000000",
            "abi": "Token",
        }
        mapping = data_source["mapping"]
        assert mapping["entities"] == ["Transfer"]
        assert mapping["abis"] == [{"name": "Token", "file": "./abis/Token.json"}]
        assert mapping["eventHandlers"] == [
            {
                "event": "Transfer(indexed address,indexed address,uint256)",
                "handler": "handleTransfer",
            }
        ]

    def test_ethereum_scaffold_without_abi(self) -> None:
        """Test placeholders when no ABI is known."""
        mapping = get_manifest_scaffold("ethereum").mapping()
        assert mapping["entities"] == ["ExampleEntity"]
        assert mapping["eventHandlers"] == []

    def test_near_manifest_scaffold(self) -> None:
        """Test the NEAR source uses an account."""
        scaffold = get_manifest_scaffold("near")
        assert scaffold.source(contract="wallet.near") == {
            "account": "wallet.near",
            "startBlock": 10662188,
        }
        assert scaffold.mapping()["receiptHandlers"] == [{"handler": "handleReceipt"}]

    def test_cosmos_manifest_scaffold(self) -> None:
        """Test the Cosmos defaults."""
        scaffold = get_manifest_scaffold("cosmos")
        assert scaffold.source() == {"startBlock": 9200001}
        assert scaffold.mapping() == {
            "apiVersion": "0.0.5",
            "language": "wasm/assemblyscript",
            "entities": ["ExampleEntity"],
            "blockHandlers": [{"handler": "handleBlock"}],
            "file": "./src/mapping.ts",
        }

    def test_render_yaml(self) -> None:
        """Test the rendered scaffold is a YAML list item."""
        rendered = get_manifest_scaffold("cosmos").render(name="Hub", network="cosmoshub-4")
        assert rendered.startswith("- kind: cosmos\n")
        assert yaml.safe_load(rendered)[0]["name"] == "Hub"

    def test_mapping_scaffolds(self) -> None:
        """Test generated mapping stubs name the default handlers."""
        abi = Abi.from_json("Token", ERC20_EVENTS)
        ethereum = get_mapping_scaffold("ethereum").generate(abi=abi)
        assert 'import { Transfer } from "../generated/Token/Token"' in ethereum
        assert "export function handleTransfer(event: Transfer): void {" in ethereum
        assert "handleReceipt" in get_mapping_scaffold("near").generate()
        assert "handleBlock" in get_mapping_scaffold("cosmos").generate()


class TestTemplateCodeGen:
    """Tests for template code generation."""

    def test_create_methods(self) -> None:
        """Test the generated static create methods."""
        codegen = EthereumTemplateCodeGen(
            {"kind": "ethereum", "name": "Pair", "source": {}, "mapping": _mapping()}
        )
        assert codegen.module_imports() == ["Address", "DataSourceContext", "DataSourceTemplate"]
        assert "DataSourceTemplate.create('Pair', [address.toHex()])" in codegen.create_method()
        assert (
            "DataSourceTemplate.createWithContext('Pair', [address.toHex()], context)"
            in codegen.create_with_context_method()
        )

    def test_generate_module(self) -> None:
        """Test the full template module."""
        module = EthereumTemplateCodeGen(
            {"kind": "ethereum", "name": "Pair", "source": {}, "mapping": _mapping()}
        ).generate()
        assert module.startswith(
            'import { Address, DataSourceContext, DataSourceTemplate } from "@graphprotocol/graph-ts"'
        )
        assert "export class Pair extends DataSourceTemplate {" in module
