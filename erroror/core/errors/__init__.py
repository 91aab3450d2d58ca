"""Core errors package.

Usage:
    from erroror.core.errors import Error, not_found, validation
"""

from erroror.core.errors.error import (
    Error,
    conflict,
    custom,
    failure,
    not_found,
    unexpected,
    validation,
)

__all__ = [
    "Error",
    "conflict",
    "custom",
    "failure",
    "not_found",
    "unexpected",
    "validation",
]
