"""
relchain exception classes.

This package provides the exception types used by relchain for
consistent error reporting.
"""

from relchain.exceptions.core import (
    ErrorContext,
    RelationErrorKind,
    RelationSyntaxError,
    RelchainError,
)

__all__ = [
    "ErrorContext",
    "RelationErrorKind",
    "RelationSyntaxError",
    "RelchainError",
]
