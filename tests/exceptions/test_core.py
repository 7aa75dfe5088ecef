"""
Tests for error context and relation syntax errors.
"""

from relchain.exceptions.core import (
    ErrorContext,
    RelationErrorKind,
    RelationSyntaxError,
    RelchainError,
)


class TestErrorContext:
    """Tests for ErrorContext formatting."""

    def test_caret_points_at_position(self):
        """Test the caret sits under the failing character."""
        ctx = ErrorContext(text="[foo] => bar", position=6)
        expression_line, caret_line = ctx.format_location().split("\n")

        assert expression_line == "  expression: [foo] => bar"
        assert caret_line.index("^") == expression_line.index("=>")

    def test_without_position(self):
        """Test only the expression is shown when position is unknown."""
        ctx = ErrorContext(text="[foo] => bar")

        assert ctx.format_location() == "  expression: [foo] => bar"

    def test_without_text(self):
        """Test an empty context formats to an empty string."""
        assert ErrorContext().format_location() == ""


class TestRelationSyntaxError:
    """Tests for RelationSyntaxError."""

    def test_is_relchain_error(self):
        """Test the exception belongs to the package hierarchy."""
        error = RelationSyntaxError("bad", RelationErrorKind.EMPTY_CHAIN)

        assert isinstance(error, RelchainError)
        assert error.reason == "bad"
        assert error.kind == RelationErrorKind.EMPTY_CHAIN
        assert error.context is None
        assert str(error) == "Invalid transitive relation: bad"

    def test_message_includes_location(self):
        """Test the message carries the formatted context."""
        error = RelationSyntaxError(
            "chain must contain at least one field",
            RelationErrorKind.EMPTY_CHAIN,
            ErrorContext(text="[] -> bar", position=1),
        )

        assert str(error).splitlines() == [
            "Invalid transitive relation: chain must contain at least one field",
            "  expression: [] -> bar",
            "               ^",
        ]
