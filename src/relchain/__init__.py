"""
relchain - parser for transitive relation expressions

A transitive relation is a chain of fields followed by a directional close
field, written as ``[foo, bar] -> baz`` or ``[foo, bar] <- baz``.
"""

from importlib.metadata import version

from relchain.exceptions import RelationErrorKind, RelationSyntaxError
from relchain.parsing import (
    ChainLink,
    ParseFailure,
    ParseResult,
    ParserOptions,
    ParseSuccess,
    TransitiveRelation,
    parse_transitive_relation,
)

__version__ = version("relchain")

__all__ = [
    "__version__",
    "ChainLink",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "ParserOptions",
    "RelationErrorKind",
    "RelationSyntaxError",
    "TransitiveRelation",
    "parse_transitive_relation",
]
