"""Ethereum contract addresses."""

from __future__ import annotations

import re

from subgraph_manifest.protocols.base import Contract, ContractValidation

ADDRESS_PATTERN = re.compile(r"(0x)?[0-9a-fA-F]{40}")


class EthereumContract(Contract):
    identifier_name = "address"

    def validate(self) -> ContractValidation:
        address = self.identifier
        if isinstance(address, str) and ADDRESS_PATTERN.fullmatch(address):
            return ContractValidation(valid=True)
        return ContractValidation(
            valid=False,
            error=(
                f"Contract address is invalid: {address}\n"
                "  Must be 40 hexadecimal characters, with an optional '0x' prefix."
            ),
        )
