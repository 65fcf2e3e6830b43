"""
Exception handlers for the data cleaner API

Error Response Format:
{
    "error": {
        "status_code": 404,
        "error_code": "CLEANER_NOT_FOUND",
        "message": "Cleaner 'foo' not found",
        "type": "Not Found",
        "details": {"cleaner": "foo"},
        "path": "/api/v1/cleaners/foo"
    }
}
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from datacleaner.exceptions import CleanerError, ErrorCode

logger = logging.getLogger(__name__)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        403: "Forbidden",
        404: "Not Found",
        409: "Conflict",
        422: "Validation Error",
        500: "Internal Server Error",
    }
    return error_types.get(status_code, "Error")


def create_error_response(
    status_code: int,
    message: str,
    error_code: str | ErrorCode | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if error_code:
        error_response["error"]["error_code"] = error_code.value if isinstance(error_code, ErrorCode) else error_code

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


async def cleaner_exception_handler(request: Request, exc: CleanerError) -> JSONResponse:
    logger.error(
        "CleanerError: %s",
        exc.message,
        extra={
            "status_code": exc.status_code,
            "error_code": exc.error_code.value,
            "path": request.url.path,
        },
    )
    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details or None,
        path=request.url.path,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the cleaner exception handlers to the application."""
    app.add_exception_handler(CleanerError, cleaner_exception_handler)  # type: ignore[arg-type]
