"""Translate relay results into HTTP responses."""

from fastapi.responses import JSONResponse

from ..relay.result import ErrorKind, RelayError, RelayResult
from .models import ErrorResponse


def error_status(error: RelayError) -> int:
    """Map a relay error onto an HTTP status code."""
    if error.kind == ErrorKind.VALIDATION:
        return 400
    if error.kind == ErrorKind.UPSTREAM and error.status_code:
        return error.status_code
    return 500


def to_response(result: RelayResult) -> JSONResponse:
    """Build the HTTP response for a relay result."""
    if result.ok:
        return JSONResponse(status_code=200, content=result.payload)

    error = result.error
    body = ErrorResponse(error=error.message, details=error.details)
    return JSONResponse(
        status_code=error_status(error),
        content=body.model_dump(exclude_none=True),
    )
