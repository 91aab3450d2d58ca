"""Error classification kinds.

Built-in kinds form a closed IntEnum so their numeric projection is simply
``int(kind)``. Domain-specific kinds outside the built-in set are carried by
the CustomErrorKind tagged variant instead of an unchecked enum cast.

Kinds:
- FAILURE (0): Generic operation failure
- UNEXPECTED (1): Unanticipated/internal error
- VALIDATION (2): Input/business-rule validation failure
- CONFLICT (3): State conflict (duplicate, concurrent modification)
- NOT_FOUND (4): Requested resource absent
- CustomErrorKind(n): Caller-supplied kind, n outside 0-4

Usage:
    from erroror.core.enums import ErrorKind, resolve_error_kind

    kind = resolve_error_kind(7)  # CustomErrorKind(value=7)
    int(kind)  # 7
"""

from dataclasses import dataclass
from enum import IntEnum


class ErrorKind(IntEnum):
    """Built-in error kinds."""

    FAILURE = 0
    UNEXPECTED = 1
    VALIDATION = 2
    CONFLICT = 3
    NOT_FOUND = 4


@dataclass(frozen=True, slots=True)
class CustomErrorKind:
    """Domain-specific error kind outside the built-in set.

    Attributes:
        value: Numeric kind supplied by the caller.
    """

    value: int

    @property
    def name(self) -> str:
        """Kind label, shared by every custom kind."""
        return "CUSTOM"

    def __int__(self) -> int:
        """Numeric projection of the kind."""
        return self.value

    def __str__(self) -> str:
        return f"CUSTOM({self.value})"


type AnyErrorKind = ErrorKind | CustomErrorKind


def resolve_error_kind(numeric_kind: int) -> ErrorKind | CustomErrorKind:
    """Resolve a numeric kind to its kind value.

    Values matching a built-in kind resolve to that member, so
    ``resolve_error_kind(2) is ErrorKind.VALIDATION``. Every other integer
    yields a CustomErrorKind. Never raises for an integer input.

    Args:
        numeric_kind: Numeric kind (built-in 0-4 or any custom value).

    Returns:
        ErrorKind member or CustomErrorKind.
    """
    try:
        return ErrorKind(numeric_kind)
    except ValueError:
        return CustomErrorKind(numeric_kind)
