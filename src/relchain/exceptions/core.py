"""
Exception classes for relchain relation parsing.

The parser reports malformed input as a failure value; these exceptions
are raised only when a caller explicitly unwraps a failed result.
"""

from dataclasses import dataclass
from enum import Enum


class RelationErrorKind(Enum):
    """Grammar rule that a relation expression violated."""

    INVALID_INPUT = "invalid_input"
    OUTER_WHITESPACE = "outer_whitespace"
    MULTILINE_INPUT = "multiline_input"
    MISSING_OPEN_BRACKET = "missing_open_bracket"
    MISSING_CLOSE_BRACKET = "missing_close_bracket"
    UNEXPECTED_BRACKET = "unexpected_bracket"
    EMPTY_CHAIN = "empty_chain"
    EMPTY_FIELD = "empty_field"
    CHAIN_TOO_LONG = "chain_too_long"
    MISSING_OPERATOR = "missing_operator"
    INVALID_OPERATOR = "invalid_operator"
    MISSING_CLOSE_FIELD = "missing_close_field"
    INVALID_CLOSE_FIELD = "invalid_close_field"


@dataclass
class ErrorContext:
    """
    Location of a syntax error inside the parsed text.

    Params:
        text: The original expression that failed to parse
        position: Zero-based character offset of the failure, if known
    """

    text: str | None = None
    position: int | None = None

    def format_location(self) -> str:
        """
        Format the expression with a caret under the failing position.

        Returns:
            Indented two-line string, or just the expression when the
            position is unknown. Empty string when there is no text.
        """
        if self.text is None:
            return ""

        lines = [f"  expression: {self.text}"]
        if self.position is not None:
            # "  expression: " is 14 characters wide
            lines.append(" " * (14 + self.position) + "^")
        return "\n".join(lines)


class RelchainError(Exception):
    """Base exception for all relchain errors."""

    pass


class RelationSyntaxError(RelchainError):
    """Raised when a failed relation parse result is unwrapped."""

    def __init__(
        self,
        reason: str,
        kind: RelationErrorKind,
        context: ErrorContext | None = None,
    ):
        """
        Initialize the exception.

        Params:
            reason: Human-readable description of the violated rule
            kind: Which grammar rule was violated
            context: Where in the expression the failure occurred
        """
        self.reason = reason
        self.kind = kind
        self.context = context

        message = f"Invalid transitive relation: {reason}"
        if context:
            location_info = context.format_location()
            if location_info:
                message = f"{message}\n{location_info}"
        super().__init__(message)
