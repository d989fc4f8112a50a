"""Tests for error module."""

from subgraph_manifest.errors import (
    AbiError,
    ErrorContext,
    ManifestError,
    ProtocolError,
    SchemaDefinitionError,
    SubgraphError,
    UnknownKindError,
)
from subgraph_manifest.validation import ValidationError, ValidationResult, format_errors


class TestErrorContext:
    """Tests for ErrorContext."""

    def test_empty_context(self) -> None:
        """Test empty context string representation."""
        assert str(ErrorContext()) == ""

    def test_full_context(self) -> None:
        """Test context with every part set."""
        ctx = ErrorContext(field_path="dataSources > 0", source="schema", hint="Fix it")
        assert str(ctx) == "[schema] at 'dataSources > 0' (hint: Fix it)"


class TestSubgraphError:
    """Tests for base error class."""

    def test_basic_error(self) -> None:
        """Test basic error creation."""
        error = SubgraphError("Something went wrong")
        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_with_hint(self) -> None:
        """Test adding hint to error."""
        error = SubgraphError("Failed").with_hint("Check the manifest")
        assert error.context.hint == "Check the manifest"
        assert str(error) == "Failed (hint: Check the manifest)"


class TestErrorTypes:
    """Tests for the concrete error types."""

    def test_schema_definition_error(self) -> None:
        """Test schema errors record the type name."""
        error = SchemaDefinitionError("Broken", type_name="Root")
        assert error.type_name == "Root"
        assert error.context.details["type_name"] == "Root"
        assert "[schema]" in str(error)

    def test_unknown_kind_is_protocol_error(self) -> None:
        """Test the hierarchy of UnknownKindError."""
        error = UnknownKindError("arweave")
        assert isinstance(error, ProtocolError)
        assert isinstance(error, SubgraphError)
        assert error.kind == "arweave"

    def test_abi_error_keeps_cause(self) -> None:
        """Test ABI errors chain the collaborator failure."""
        cause = ValueError("bad")
        error = AbiError("No valid ABI", abi_name="ERC20", file="a.json", cause=cause)
        assert error.__cause__ is cause
        assert error.context.details == {"abi_name": "ERC20", "file": "a.json"}

    def test_manifest_error(self) -> None:
        """Test the combined report is the message."""
        records = (ValidationError(("specVersion",), "No value provided"),)
        error = ManifestError("Error in subgraph.yaml:", records, filename="subgraph.yaml")
        assert str(error) == "Error in subgraph.yaml:"
        assert error.errors == records


class TestValidationRecords:
    """Tests for validation records and reports."""

    def test_format_path(self) -> None:
        """Test path rendering."""
        assert ValidationError(("dataSources", 0, "kind"), "x").format_path() == (
            "dataSources > 0 > kind"
        )
        assert ValidationError((), "x").format_path() == "/"

    def test_format_errors(self) -> None:
        """Test the combined error report."""
        report = format_errors(
            "subgraph.yaml",
            [
                ValidationError(("specVersion",), "No value provided"),
                ValidationError((), "Expected map, found null: null"),
            ],
        )
        assert report == (
            "Error in subgraph.yaml:\n"
            "\n"
            "  Path: specVersion\n"
            "  No value provided\n"
            "\n"
            "  Path: /\n"
            "  Expected map, found null: null"
        )

    def test_result_merge(self) -> None:
        """Test merging results keeps order."""
        first = ValidationResult()
        first.add_warning(("a",), "warn")
        second = ValidationResult()
        second.add_error(("b",), "err")
        first.merge(second)
        assert not first.valid
        assert not first
        assert [e.path for e in first.errors] == [("b",)]
        assert [w.path for w in first.warnings] == [("a",)]
