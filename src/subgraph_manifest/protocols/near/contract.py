"""NEAR account IDs."""

from __future__ import annotations

import re

from subgraph_manifest.protocols.base import Contract, ContractValidation

ACCOUNT_PATTERN = re.compile(r"(([a-z\d]+[-_])*[a-z\d]+\.)*([a-z\d]+[-_])*[a-z\d]+")
MIN_ACCOUNT_LENGTH = 2
MAX_ACCOUNT_LENGTH = 64


class NearContract(Contract):
    identifier_name = "account"

    def validate(self) -> ContractValidation:
        account = self.identifier
        if not isinstance(account, str) or not (
            MIN_ACCOUNT_LENGTH <= len(account) <= MAX_ACCOUNT_LENGTH
        ):
            return ContractValidation(
                valid=False,
                error=(
                    f"Account is invalid: {account}\n"
                    f"  Must be between {MIN_ACCOUNT_LENGTH} and "
                    f"{MAX_ACCOUNT_LENGTH} characters long."
                ),
            )
        if not ACCOUNT_PATTERN.fullmatch(account):
            return ContractValidation(
                valid=False,
                error=(
                    f"Account is invalid: {account}\n"
                    "  Must consist of lowercase alphanumeric parts separated by "
                    "'.', '-' or '_'."
                ),
            )
        return ContractValidation(valid=True)
