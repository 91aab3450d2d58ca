"""Problem Details payload (RFC 7807) for a failed request.

The payload is built from the first Error of a failure. Validation failures
also list one ErrorDetail per error parameter, so a client can highlight
each offending field.
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One offending parameter of a validation Error."""

    field: str = Field(..., description="Error parameter, usually a field name")
    code: str = Field(..., description="Error.code of the owning error")
    message: str = Field(..., description="Error.description of the owning error")


class ProblemDetails(BaseModel):
    """RFC 7807 body returned for a failed request.

    Attributes:
        type: "{base_url}/errors/{Error.code}", or "about:blank" without a base URL
        title: Title for the error kind
        status: HTTP status mapped from the error kind
        detail: Error.detail, falling back to Error.description
        instance: Path of the failing request
        errors: Parameter entries, only for all-validation failures
        trace_id: Request trace ID, when the caller has one
    """

    type: str = Field(..., description="Problem type URI derived from the error code")
    title: str = Field(..., description="Title for the error kind")
    status: int = Field(..., description="HTTP status mapped from the error kind")
    detail: str = Field(..., description="Error detail or description")
    instance: str = Field(..., description="Path of the failing request")
    errors: list[ErrorDetail] | None = Field(
        None, description="Offending parameters of validation errors"
    )
    trace_id: str | None = Field(None, description="Request trace ID")
