"""Error value for Railway-Oriented Programming.

Error is an immutable, structurally-comparable record describing one error
occurrence. It does NOT inherit from Exception: errors flow through the
system as data (inside Result types), they are never raised.

Fields:
- code: Stable machine-readable identifier (e.g. "General.Failure")
- description: Human-readable summary
- kind: ErrorKind member, or CustomErrorKind for values outside 0-4
- numeric_kind: Integer projection of kind (read-only)
- detail: Free-text elaboration, "" when absent
- parameters: Ordered contextual tokens (e.g. field names), () when absent

Construction goes through the named factories, one family per kind. The third
positional argument is read by shape: a str is the detail, any other iterable
is the parameters.

Usage:
    from erroror.core.errors import Error

    Error.not_found("User.Missing", "User not found")
    Error.validation("Field.Required", "Name is required", ["Name"])
    Error.not_found("User.Missing", "User not found", "id=7", ["id"])
    Error.custom(42, "Billing.Overdue", "Invoice is overdue")
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from erroror.core.enums import CustomErrorKind, ErrorKind, resolve_error_kind


def _freeze_parameters(parameters: Iterable[str]) -> tuple[str, ...]:
    """Freeze parameters into a tuple.

    Raises:
        TypeError: If a bare string is passed (it would split into characters).
    """
    if isinstance(parameters, str):
        raise TypeError("parameters must be an iterable of strings, not a str")
    return tuple(parameters)


def _split_optionals(
    detail: str | Iterable[str] | None,
    parameters: Iterable[str] | None,
) -> tuple[str | None, tuple[str, ...] | None]:
    """Resolve the optional arguments of a factory call by shape.

    Returns:
        (detail, parameters), each None when the caller did not supply it.

    Raises:
        TypeError: If parameters are passed both positionally and by keyword.
    """
    if detail is not None and not isinstance(detail, str):
        if parameters is not None:
            raise TypeError("parameters passed both positionally and by keyword")
        return None, _freeze_parameters(detail)
    frozen = _freeze_parameters(parameters) if parameters is not None else None
    return detail, frozen


@dataclass(frozen=True, slots=True, kw_only=True)
class Error:
    """Immutable error value (does NOT inherit from Exception).

    Equality and hashing are structural over code, description, kind,
    detail and parameters.

    Attributes:
        code: Machine-readable error code.
        description: Human-readable error description.
        kind: Classification driving downstream handling.
        detail: Optional elaboration, never None.
        parameters: Optional contextual tokens, never None.
    """

    code: str
    description: str
    kind: ErrorKind | CustomErrorKind
    detail: str = ""
    parameters: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # CustomErrorKind(2) and plain 2 both collapse to ErrorKind.VALIDATION
        object.__setattr__(self, "kind", resolve_error_kind(int(self.kind)))
        if not isinstance(self.parameters, tuple):
            object.__setattr__(
                self, "parameters", _freeze_parameters(self.parameters)
            )

    @property
    def numeric_kind(self) -> int:
        """Integer projection of kind."""
        return int(self.kind)

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code}: {self.description}"

    @classmethod
    def failure(
        cls,
        code: str = "General.Failure",
        description: str = "A failure has occurred.",
        detail: str | Iterable[str] | None = None,
        parameters: Iterable[str] | None = None,
    ) -> Self:
        """Create a FAILURE error.

        When detail or parameters are supplied the resulting kind is
        VALIDATION, not FAILURE. Existing callers match on that kind.

        Args:
            code: Unique error code.
            description: Error description.
            detail: Detail string, or the parameters when not a str.
            parameters: Parameter tokens.

        Returns:
            Error of kind FAILURE, or VALIDATION when optionals are supplied.
        """
        detail, frozen = _split_optionals(detail, parameters)
        if detail is None and frozen is None:
            return cls(code=code, description=description, kind=ErrorKind.FAILURE)
        return cls(
            code=code,
            description=description,
            kind=ErrorKind.VALIDATION,
            detail=detail or "",
            parameters=frozen or (),
        )

    @classmethod
    def unexpected(
        cls,
        code: str = "General.Unexpected",
        description: str = "An unexpected error has occurred.",
        detail: str = "",
    ) -> Self:
        """Create an UNEXPECTED error.

        Args:
            code: Unique error code.
            description: Error description.
            detail: Detail string.
        """
        return cls(
            code=code,
            description=description,
            kind=ErrorKind.UNEXPECTED,
            detail=detail,
        )

    @classmethod
    def validation(
        cls,
        code: str = "General.Validation",
        description: str = "A validation error has occurred.",
        detail: str | Iterable[str] | None = None,
        parameters: Iterable[str] | None = None,
    ) -> Self:
        """Create a VALIDATION error.

        Args:
            code: Unique error code.
            description: Error description.
            detail: Detail string, or the parameters when not a str.
            parameters: Parameter tokens (e.g. offending field names).

        Example:
            >>> Error.validation("Field.Required", "Name is required", ["Name"])
        """
        detail, frozen = _split_optionals(detail, parameters)
        return cls(
            code=code,
            description=description,
            kind=ErrorKind.VALIDATION,
            detail=detail or "",
            parameters=frozen or (),
        )

    @classmethod
    def conflict(
        cls,
        code: str = "General.Conflict",
        description: str = "A conflict error has occurred.",
    ) -> Self:
        """Create a CONFLICT error."""
        return cls(code=code, description=description, kind=ErrorKind.CONFLICT)

    @classmethod
    def not_found(
        cls,
        code: str = "General.NotFound",
        description: str = "A 'Not Found' error has occurred.",
        detail: str | Iterable[str] | None = None,
        parameters: Iterable[str] | None = None,
    ) -> Self:
        """Create a NOT_FOUND error.

        Args:
            code: Unique error code.
            description: Error description.
            detail: Detail string, or the parameters when not a str.
            parameters: Parameter tokens (e.g. lookup keys).
        """
        detail, frozen = _split_optionals(detail, parameters)
        return cls(
            code=code,
            description=description,
            kind=ErrorKind.NOT_FOUND,
            detail=detail or "",
            parameters=frozen or (),
        )

    @classmethod
    def custom(
        cls,
        numeric_kind: int,
        code: str,
        description: str,
        detail: str | Iterable[str] | None = None,
        parameters: Iterable[str] | None = None,
    ) -> Self:
        """Create an error of a caller-defined kind.

        Numeric kinds 0-4 resolve to the matching built-in kind; any other
        value becomes a CustomErrorKind.

        Args:
            numeric_kind: Integer identifying the kind.
            code: Unique error code.
            description: Error description.
            detail: Detail string, or the parameters when not a str.
            parameters: Parameter tokens.
        """
        detail, frozen = _split_optionals(detail, parameters)
        return cls(
            code=code,
            description=description,
            kind=resolve_error_kind(numeric_kind),
            detail=detail or "",
            parameters=frozen or (),
        )


failure = Error.failure
unexpected = Error.unexpected
validation = Error.validation
conflict = Error.conflict
not_found = Error.not_found
custom = Error.custom
