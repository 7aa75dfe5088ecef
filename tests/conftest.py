"""
Shared test fixtures for the relchain test suite.
"""

import pytest

from relchain.parsing.options import ParserOptions
from relchain.parsing.parser import TransitiveRelationParser


@pytest.fixture
def parser():
    """Parser with default options."""
    return TransitiveRelationParser()


@pytest.fixture
def strict_parser():
    """Parser that rejects outer whitespace and chains longer than two fields.

    Usage:
        def test_something(strict_parser):
            result = strict_parser.parse("[foo] -> bar")
    """
    return TransitiveRelationParser(
        ParserOptions(allow_outer_whitespace=False, max_chain_length=2)
    )
