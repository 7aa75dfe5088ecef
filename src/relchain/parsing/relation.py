"""
Value types produced by the transitive relation parser.

A relation such as ``[foo, bar] <- baz`` becomes a ``TransitiveRelation``
with chain ``(ChainLink("foo"), ChainLink("bar"))``, close field ``"baz"``
and ``close_reversed=True``. Parsing yields a ``ParseResult``: either a
``ParseSuccess`` wrapping the relation or a ``ParseFailure`` describing
the violated grammar rule.
"""

from typing import Any

import attrs
from attrs import frozen

from relchain.exceptions.core import (
    ErrorContext,
    RelationErrorKind,
    RelationSyntaxError,
)

FORWARD_OPERATOR = "->"
REVERSED_OPERATOR = "<-"

# Every line boundary recognised by str.splitlines
LINE_BREAKS = "\n\r\v\f\x1c\x1d\x1e\x85\u2028\u2029"

# Characters that delimit the grammar and so can never be part of a name
RESERVED_CHARACTERS = frozenset(",[]" + LINE_BREAKS)


def _validate_field_name(instance: Any, attribute: Any, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{attribute.name} must be a string, got {type(value).__name__}")
    if not value or value != value.strip():
        raise ValueError(f"{attribute.name} must be non-empty and trimmed: {value!r}")
    reserved = RESERVED_CHARACTERS.intersection(value)
    if reserved:
        raise ValueError(
            f"{attribute.name} contains reserved characters {sorted(reserved)}: {value!r}"
        )


def _validate_chain(instance: Any, attribute: Any, value: tuple) -> None:
    if not value:
        raise ValueError("chain must contain at least one link")
    for link in value:
        if not isinstance(link, ChainLink):
            raise TypeError(f"chain links must be ChainLink, got {type(link).__name__}")


@frozen
class ChainLink:
    """A single field traversed by the chain."""

    field: str = attrs.field(validator=_validate_field_name)

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field}


@frozen
class TransitiveRelation:
    """Parsed relation: follow each chain field in order, then relate to the close field."""

    chain: tuple[ChainLink, ...] = attrs.field(converter=tuple, validator=_validate_chain)
    close_field: str = attrs.field(validator=_validate_field_name)
    close_reversed: bool = attrs.field(
        default=False, validator=attrs.validators.instance_of(bool)
    )

    @classmethod
    def from_fields(
        cls, fields: list[str], close_field: str, close_reversed: bool = False
    ) -> "TransitiveRelation":
        """
        Build a relation from plain field names.

        Params:
            fields: Chain field names in traversal order
            close_field: Name after the directional operator
            close_reversed: Whether the operator is '<-'

        Returns:
            The validated relation
        """
        return cls(
            chain=tuple(ChainLink(name) for name in fields),
            close_field=close_field,
            close_reversed=close_reversed,
        )

    @property
    def fields(self) -> tuple[str, ...]:
        """Chain field names in traversal order."""
        return tuple(link.field for link in self.chain)

    @property
    def operator(self) -> str:
        return REVERSED_OPERATOR if self.close_reversed else FORWARD_OPERATOR

    def to_dict(self) -> dict[str, Any]:
        return {
            "chain": [link.to_dict() for link in self.chain],
            "close_field": self.close_field,
            "close_reversed": self.close_reversed,
        }

    def __str__(self) -> str:
        """Return the canonical DSL text, e.g. '[foo, bar] -> baz'."""
        return f"[{', '.join(self.fields)}] {self.operator} {self.close_field}"


@frozen
class ParseSuccess:
    """Successful parse carrying the relation."""

    data: TransitiveRelation

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> TransitiveRelation:
        return self.data

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "data": self.data.to_dict()}


@frozen
class ParseFailure:
    """
    Failed parse describing which grammar rule was violated.

    Params:
        reason: Human-readable description of the failure
        kind: The violated grammar rule
        text: The input that was being parsed, when it was a string
        position: Zero-based offset in ``text`` where parsing stopped
    """

    reason: str
    kind: RelationErrorKind
    text: str | None = None
    position: int | None = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> TransitiveRelation:
        """Raise the failure as a RelationSyntaxError."""
        raise RelationSyntaxError(
            self.reason,
            self.kind,
            ErrorContext(text=self.text, position=self.position),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"ok": False, "reason": self.reason}


ParseResult = ParseSuccess | ParseFailure
