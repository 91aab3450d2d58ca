"""Core enums package.

Usage:
    from erroror.core.enums import ErrorKind, CustomErrorKind, Environment
"""

from erroror.core.enums.environment import Environment
from erroror.core.enums.error_kind import (
    AnyErrorKind,
    CustomErrorKind,
    ErrorKind,
    resolve_error_kind,
)

__all__ = [
    "AnyErrorKind",
    "CustomErrorKind",
    "Environment",
    "ErrorKind",
    "resolve_error_kind",
]
