"""
Tests for parser configuration.
"""

import pytest
from pydantic import ValidationError

from relchain.parsing.options import DEFAULT_OPTIONS, ParserOptions


class TestParserOptions:
    """Tests for ParserOptions validation."""

    def test_defaults(self):
        """Test defaults accept outer whitespace and any chain length."""
        assert DEFAULT_OPTIONS.allow_outer_whitespace is True
        assert DEFAULT_OPTIONS.max_chain_length is None

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_max_chain_length_rejected(self, length):
        """Test max_chain_length must be positive."""
        with pytest.raises(ValidationError):
            ParserOptions(max_chain_length=length)

    def test_unknown_option_rejected(self):
        """Test misspelled options are not silently ignored."""
        with pytest.raises(ValidationError):
            ParserOptions(allow_whitespace=False)

    def test_options_are_frozen(self):
        """Test options cannot change after creation."""
        options = ParserOptions()
        with pytest.raises(ValidationError):
            options.max_chain_length = 3
