"""Error response builder for RFC 7807 Problem Details.

Converts Error values (usually the errors of a Failure result) into
standardized Problem Details JSON responses. Status codes are chosen from the
error kind; custom kinds are mapped through settings.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from collections.abc import Sequence
from http import HTTPStatus

from fastapi import Request, status
from fastapi.responses import JSONResponse

from erroror.core.config import get_settings
from erroror.core.container import get_logger
from erroror.core.enums import ErrorKind
from erroror.core.errors import Error
from erroror.core.result import Failure
from erroror.domain.protocols.logger_protocol import LoggerProtocol
from erroror.presentation.errors.problem_details import ErrorDetail, ProblemDetails

_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_TITLE_BY_KIND: dict[ErrorKind, str] = {
    ErrorKind.FAILURE: "Operation Failed",
    ErrorKind.UNEXPECTED: "Internal Server Error",
    ErrorKind.VALIDATION: "Validation Failed",
    ErrorKind.CONFLICT: "Resource Conflict",
    ErrorKind.NOT_FOUND: "Resource Not Found",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> error = Error.not_found("User.NotFound", "User not found")
        >>> response = ErrorResponseBuilder.from_errors(
        ...     [error], request, trace_id="550e8400-e29b-41d4-a716-446655440000"
        ... )
        >>> # Returns 404 with ProblemDetails JSON
    """

    @staticmethod
    def get_status_code(error: Error) -> int:
        """Map an error to an HTTP status code.

        Built-in kinds use a fixed mapping. Custom kinds are looked up by
        numeric kind in settings.custom_kind_status_codes and default to 500.

        Args:
            error: Error to map.

        Returns:
            HTTP status code (400-599)
        """
        if isinstance(error.kind, ErrorKind):
            return _STATUS_BY_KIND[error.kind]
        return get_settings().custom_kind_status_codes.get(
            error.numeric_kind, status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    @staticmethod
    def get_title(error: Error) -> str:
        """Get human-readable title for an error.

        Custom kinds use the reason phrase of their mapped status code.
        """
        if isinstance(error.kind, ErrorKind):
            return _TITLE_BY_KIND[error.kind]
        try:
            return HTTPStatus(ErrorResponseBuilder.get_status_code(error)).phrase
        except ValueError:
            return "Error"

    @staticmethod
    def to_problem_details(
        errors: Sequence[Error],
        instance: str,
        trace_id: str | None = None,
    ) -> ProblemDetails:
        """Build Problem Details from one or more errors.

        Status, title and type come from the first error. When every error
        is a validation error, each parameter becomes an ErrorDetail entry.

        Args:
            errors: Errors to convert (at least one).
            instance: Path of the failing request.
            trace_id: Request trace ID for debugging.

        Returns:
            ProblemDetails model.

        Raises:
            ValueError: If errors is empty.
        """
        if not errors:
            raise ValueError("At least one error is required")

        first = errors[0]
        base_url = get_settings().problem_type_base_url
        problem = ProblemDetails(
            type=f"{base_url}/errors/{first.code}" if base_url else "about:blank",
            title=ErrorResponseBuilder.get_title(first),
            status=ErrorResponseBuilder.get_status_code(first),
            detail=first.detail or first.description,
            instance=instance,
            errors=None,
            trace_id=trace_id,
        )

        if all(error.kind == ErrorKind.VALIDATION for error in errors):
            details = [
                ErrorDetail(
                    field=parameter,
                    code=error.code,
                    message=error.description,
                )
                for error in errors
                for parameter in error.parameters
            ]
            problem.errors = details or None

        return problem

    @staticmethod
    def from_errors(
        errors: Sequence[Error],
        request: Request,
        trace_id: str | None = None,
        logger: LoggerProtocol | None = None,
    ) -> JSONResponse:
        """Convert errors to an RFC 7807 JSON response.

        Logs the failure at warning level for 4xx and error level for 5xx.

        Args:
            errors: Errors to convert (at least one).
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID for debugging.
            logger: Logger override; the container logger is used otherwise.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        problem = ErrorResponseBuilder.to_problem_details(
            errors, instance=str(request.url.path), trace_id=trace_id
        )

        log = logger or get_logger()
        context = {
            "error_code": errors[0].code,
            "error_kind": errors[0].kind.name,
            "numeric_kind": errors[0].numeric_kind,
            "error_count": len(errors),
            "status_code": problem.status,
            "path": problem.instance,
            "trace_id": trace_id,
        }
        if problem.status >= 500:
            log.error("Request failed", **context)
        else:
            log.warning("Request rejected", **context)

        return JSONResponse(
            status_code=problem.status,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def from_failure(
        failure: Failure,
        request: Request,
        trace_id: str | None = None,
        logger: LoggerProtocol | None = None,
    ) -> JSONResponse:
        """Convert a Failure result to an RFC 7807 JSON response."""
        return ErrorResponseBuilder.from_errors(
            failure.errors, request, trace_id=trace_id, logger=logger
        )
