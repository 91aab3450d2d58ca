"""Problem-details mapping for error values.

Usage:
    from erroror.presentation.errors import ErrorResponseBuilder
"""

from erroror.presentation.errors.error_response_builder import ErrorResponseBuilder
from erroror.presentation.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = ["ErrorDetail", "ErrorResponseBuilder", "ProblemDetails"]
