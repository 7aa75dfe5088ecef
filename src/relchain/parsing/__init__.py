"""
relchain parsing components.

This package provides the transitive relation parser, its result types
and its configuration.
"""

from relchain.parsing.options import ParserOptions
from relchain.parsing.parser import (
    TransitiveRelationParser,
    parse_transitive_relation,
)
from relchain.parsing.relation import (
    ChainLink,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    TransitiveRelation,
)

__all__ = [
    "ChainLink",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "ParserOptions",
    "TransitiveRelation",
    "TransitiveRelationParser",
    "parse_transitive_relation",
]
