"""
Parser for transitive relation expressions.

A transitive relation is written as a bracketed chain of field names, a
directional operator and a close field:

    [foo, bar, baz] -> qux
    [foo] <- qux

Malformed input never raises; ``parse`` returns a ``ParseFailure`` naming
the violated rule so callers must branch on ``result.ok``.
"""

import logging
import re
from typing import NoReturn

from relchain.exceptions.core import (
    ErrorContext,
    RelationErrorKind,
    RelationSyntaxError,
)
from relchain.parsing.options import DEFAULT_OPTIONS, ParserOptions
from relchain.parsing.relation import (
    FORWARD_OPERATOR,
    LINE_BREAKS,
    REVERSED_OPERATOR,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    TransitiveRelation,
)

logger = logging.getLogger(__name__)


class TransitiveRelationParser:
    """Parser for transitive relation expressions."""

    # Maps operator token to the close_reversed flag
    OPERATORS = {FORWARD_OPERATOR: False, REVERSED_OPERATOR: True}

    # Longest run of operator-like punctuation, so '->>' or '=>' is reported whole
    OPERATOR_TOKEN_PATTERN = re.compile(r"[-<>=~!|]+")

    LINE_BREAK_PATTERN = re.compile(f"[{re.escape(LINE_BREAKS)}]")

    def __init__(self, options: ParserOptions | None = None):
        self.options = options or DEFAULT_OPTIONS

    def parse(self, text: str) -> ParseResult:
        """
        Parse a relation expression.

        Params:
            text: Single-line expression such as '[foo, bar] -> baz'

        Returns:
            ParseSuccess with the relation, or ParseFailure describing why
            the expression is malformed
        """
        if not isinstance(text, str):
            reason = f"expected a string, got {type(text).__name__}"
            logger.debug("Rejected relation input: %s", reason)
            return ParseFailure(reason=reason, kind=RelationErrorKind.INVALID_INPUT)

        try:
            relation = self._parse_relation(text)
        except RelationSyntaxError as e:
            position = e.context.position if e.context else None
            logger.debug("Failed to parse relation %r: %s", text, e.reason)
            return ParseFailure(
                reason=e.reason, kind=e.kind, text=text, position=position
            )

        return ParseSuccess(relation)

    def _parse_relation(self, text: str) -> TransitiveRelation:
        """Scan the expression left to right, raising at the first violated rule."""
        body, offset = self._strip_outer_whitespace(text)

        line_break = self.LINE_BREAK_PATTERN.search(body)
        if line_break:
            self._fail(
                text,
                offset + line_break.start(),
                RelationErrorKind.MULTILINE_INPUT,
                "relation must be written on a single line",
            )

        if not body.startswith("["):
            found = f"found {body[0]!r}" if body else "expression is empty"
            self._fail(
                text,
                offset,
                RelationErrorKind.MISSING_OPEN_BRACKET,
                f"relation must start with '[', {found}",
            )

        close_index = body.find("]")
        nested_index = body.find("[", 1)
        if nested_index != -1 and (close_index == -1 or nested_index < close_index):
            self._fail(
                text,
                offset + nested_index,
                RelationErrorKind.UNEXPECTED_BRACKET,
                "nested '[' is not allowed inside the chain",
            )
        if close_index == -1:
            self._fail(
                text,
                offset + len(body),
                RelationErrorKind.MISSING_CLOSE_BRACKET,
                "chain is missing its closing ']'",
            )

        fields = self._parse_chain(text, body[1:close_index], offset + 1)
        close_reversed, close_field = self._parse_close(
            text, body[close_index + 1 :], offset + close_index + 1
        )

        return TransitiveRelation.from_fields(
            fields, close_field=close_field, close_reversed=close_reversed
        )

    def _strip_outer_whitespace(self, text: str) -> tuple[str, int]:
        """
        Remove whitespace around the whole expression.

        Returns:
            The stripped body and the offset of its first character in text
        """
        body = text.strip()
        if body == text:
            return body, 0

        if not self.options.allow_outer_whitespace and body:
            position = 0 if text[0].isspace() else len(text.rstrip())
            self._fail(
                text,
                position,
                RelationErrorKind.OUTER_WHITESPACE,
                "whitespace around the relation is not allowed",
            )

        return body, len(text) - len(text.lstrip())

    def _parse_chain(self, text: str, inner: str, offset: int) -> list[str]:
        """
        Split the bracketed chain into trimmed field names.

        Params:
            text: Full original expression, for error positions
            inner: Content between '[' and ']'
            offset: Position of inner[0] within text
        """
        if not inner.strip():
            self._fail(
                text,
                offset,
                RelationErrorKind.EMPTY_CHAIN,
                "chain must contain at least one field",
            )

        fields = []
        cursor = offset
        for raw_name in inner.split(","):
            name = raw_name.strip()
            if not name:
                self._fail(
                    text,
                    cursor,
                    RelationErrorKind.EMPTY_FIELD,
                    f"chain field {len(fields) + 1} is empty",
                )
            fields.append(name)
            cursor += len(raw_name) + 1

        max_length = self.options.max_chain_length
        if max_length is not None and len(fields) > max_length:
            self._fail(
                text,
                offset,
                RelationErrorKind.CHAIN_TOO_LONG,
                f"chain has {len(fields)} fields, at most {max_length} allowed",
            )

        return fields

    def _parse_close(self, text: str, rest: str, offset: int) -> tuple[bool, str]:
        """
        Parse the operator and close field that follow ']'.

        Returns:
            Tuple of (close_reversed, close_field)
        """
        stripped = rest.lstrip()
        position = offset + len(rest) - len(stripped)

        if stripped[:1] in ("[", "]"):
            self._fail(
                text,
                position,
                RelationErrorKind.UNEXPECTED_BRACKET,
                f"unexpected {stripped[0]!r} after the chain",
            )

        token_match = self.OPERATOR_TOKEN_PATTERN.match(stripped)
        if not token_match:
            self._fail(
                text,
                position,
                RelationErrorKind.MISSING_OPERATOR,
                "expected '->' or '<-' after ']'",
            )

        token = token_match.group()
        if token not in self.OPERATORS:
            self._fail(
                text,
                position,
                RelationErrorKind.INVALID_OPERATOR,
                f"unknown operator {token!r}, expected '->' or '<-'",
            )

        close_field = stripped[len(token) :].strip()
        if not close_field:
            self._fail(
                text,
                position + len(token),
                RelationErrorKind.MISSING_CLOSE_FIELD,
                f"missing close field after '{token}'",
            )

        for index, char in enumerate(close_field):
            if char in "[]":
                kind = RelationErrorKind.UNEXPECTED_BRACKET
            elif char == ",":
                kind = RelationErrorKind.INVALID_CLOSE_FIELD
            else:
                continue
            self._fail(
                text,
                text.rfind(close_field) + index,
                kind,
                f"close field cannot contain {char!r}",
            )

        return self.OPERATORS[token], close_field

    @staticmethod
    def _fail(text: str, position: int, kind: RelationErrorKind, reason: str) -> NoReturn:
        raise RelationSyntaxError(
            reason, kind, ErrorContext(text=text, position=position)
        )


_default_parser = TransitiveRelationParser()


def parse_transitive_relation(
    text: str, options: ParserOptions | None = None
) -> ParseResult:
    """
    Convenience function to parse a transitive relation expression.

    Params:
        text: The expression to parse, e.g. '[foo, bar] <- baz'
        options: Parser strictness settings, defaults when omitted

    Returns:
        ParseSuccess or ParseFailure; never raises for malformed input
    """
    parser = _default_parser if options is None else TransitiveRelationParser(options)
    return parser.parse(text)
