"""
Code generation for Ethereum data source templates.

A template ``Foo`` becomes an AssemblyScript class with static ``create``
and ``createWithContext`` methods that instantiate the template for a
contract address at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from subgraph_manifest.manifest.model import DataSourceTemplate


class EthereumTemplateCodeGen:
    """Generates the binding class of one data source template."""

    def __init__(self, template: DataSourceTemplate | Mapping[str, Any]) -> None:
        if isinstance(template, Mapping):
            template = DataSourceTemplate.model_validate(template)
        self.template = template

    @property
    def name(self) -> str:
        return self.template.name

    def module_imports(self) -> list[str]:
        """Names the generated module imports from ``@graphprotocol/graph-ts``."""
        return ["Address", "DataSourceContext", "DataSourceTemplate"]

    def create_method(self) -> str:
        return "\n".join(
            [
                "  static create(address: Address): void {",
                f"    DataSourceTemplate.create('{self.name}', [address.toHex()])",
                "  }",
            ]
        )

    def create_with_context_method(self) -> str:
        return "\n".join(
            [
                "  static createWithContext(address: Address, context: DataSourceContext): void {",
                f"    DataSourceTemplate.createWithContext('{self.name}', [address.toHex()], context)",
                "  }",
            ]
        )

    def generate(self) -> str:
        """The full module: imports plus the template class."""
        return "\n".join(
            [
                f"import {{ {', '.join(self.module_imports())} }} from \"@graphprotocol/graph-ts\"",
                "",
                f"export class {self.name} extends DataSourceTemplate {{",
                self.create_method(),
                "",
                self.create_with_context_method(),
                "}",
                "",
            ]
        )
