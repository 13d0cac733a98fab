"""
Global Exception Handlers

Error Response Format:
{
    "error": {
        "status_code": 406,
        "message": "None of the supported values satisfies the Accept header",
        "type": "Not Acceptable",
        "details": {"header": "Accept", "supported": ["application/json"]},
        "path": "/api/v1/negotiation/media-type"
    }
}
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from negotiation.exceptions import NegotiationError

logger = logging.getLogger(__name__)


def create_error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
    path: str | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        status_code: HTTP status code
        message: Human-readable error message
        details: Additional error details
        path: Request path that caused the error

    Returns:
        JSONResponse with standardized error format
    """
    error_response: dict[str, Any] = {
        "error": {
            "status_code": status_code,
            "message": message,
            "type": get_error_type(status_code),
        }
    }

    if details:
        error_response["error"]["details"] = details

    if path:
        error_response["error"]["path"] = path

    return JSONResponse(status_code=status_code, content=error_response)


def get_error_type(status_code: int) -> str:
    """Get a human-readable error type based on status code."""
    error_types = {
        400: "Bad Request",
        404: "Not Found",
        406: "Not Acceptable",
        422: "Validation Error",
        500: "Internal Server Error",
    }
    return error_types.get(status_code, "Error")


async def negotiation_exception_handler(request: Request, exc: NegotiationError) -> JSONResponse:
    """
    Handle negotiation exceptions.

    Server-side failures (e.g. a comparator precondition) are logged with
    their details but answered with a generic message.
    """
    if exc.status_code >= 500:
        logger.error(
            f"NegotiationError: {exc.message}",
            exc_info=exc,
            extra={"status_code": exc.status_code, "path": request.url.path, "details": exc.details},
        )
        return create_error_response(
            status_code=exc.status_code,
            message="An unexpected error occurred. Please try again later.",
            path=request.url.path,
        )

    logger.warning(
        f"NegotiationError: {exc.message}",
        extra={"status_code": exc.status_code, "path": request.url.path, "details": exc.details},
    )
    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        details=exc.details if exc.details else None,
        path=request.url.path,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle standard HTTP exceptions."""
    logger.warning(
        f"HTTPException: {exc.detail}",
        extra={"status_code": exc.status_code, "path": request.url.path},
    )
    return create_error_response(
        status_code=exc.status_code,
        message=str(exc.detail),
        path=request.url.path,
    )


def register_exception_handlers(app) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(NegotiationError, negotiation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    logger.info("Exception handlers registered successfully")
