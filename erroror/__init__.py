"""Explicit, inspectable error values and results.

Usage:
    from erroror import Error, Failure, Success

    def find_user(user_id: int) -> Result[User]:
        if user_id not in users:
            return Failure.of(Error.not_found("User.NotFound", "User not found"))
        return Success(value=users[user_id])
"""

from erroror.core.enums import AnyErrorKind, CustomErrorKind, ErrorKind
from erroror.core.errors import (
    Error,
    conflict,
    custom,
    failure,
    not_found,
    unexpected,
    validation,
)
from erroror.core.result import Failure, Result, Success

__all__ = [
    "AnyErrorKind",
    "CustomErrorKind",
    "Error",
    "ErrorKind",
    "Failure",
    "Result",
    "Success",
    "conflict",
    "custom",
    "failure",
    "not_found",
    "unexpected",
    "validation",
]
