"""
Negotiation access logging

One structured record per request with the request ID, timing and what the
request negotiated: the locale picked by LanguageMiddleware and, for routes
that choose a representation, the media type.
"""

import json
import logging
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# request.state attributes set by negotiation code
NEGOTIATED_FIELDS: tuple[str, ...] = ("locale", "media_type")
ACCESS_FIELDS: tuple[str, ...] = ("method", "path", "status_code", "duration_ms", *NEGOTIATED_FIELDS)

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


class StructuredFormatter(logging.Formatter):
    """Render a record as one JSON object, access fields included when present."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", ""),
        }
        log_data.update({key: getattr(record, key) for key in ACCESS_FIELDS if hasattr(record, key)})
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False)


def negotiated_fields(request: Request) -> dict[str, str]:
    """Collect whatever the request negotiated so far."""
    return {
        field: getattr(request.state, field)
        for field in NEGOTIATED_FIELDS
        if getattr(request.state, field, None)
    }


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its negotiation outcome and echo ``X-Request-ID``."""

    def __init__(self, app: ASGIApp, logger_name: str = "negotiation.access", skip_paths: tuple[str, ...] = ("/health",)):
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)
        self.skip_paths = skip_paths

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_id_var.set(request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            self._log_request(request, 500, started, exc_info=True)
            raise

        response.headers["X-Request-ID"] = request_id
        self._log_request(request, response.status_code, started)
        return response

    def _log_request(self, request: Request, status_code: int, started: float, exc_info: bool = False) -> None:
        if request.url.path in self.skip_paths:
            return

        duration_ms = round((time.perf_counter() - started) * 1000, 2)
        negotiated = negotiated_fields(request)

        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        message = f"{request.method} {request.url.path} - {status_code} ({duration_ms:.2f}ms)"
        if negotiated:
            message += " " + " ".join(f"{key}={value}" for key, value in negotiated.items())

        self.logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
                **negotiated,
            },
        )


def setup_structured_logging(log_level: str = "INFO", json_format: bool = True) -> logging.Logger:
    """Attach one handler to the ``negotiation`` logger tree.

    The root logger is left alone, so servers and test runners keep their
    own handlers. Calling this again only updates the level.
    """
    package_logger = logging.getLogger("negotiation")
    package_logger.setLevel(log_level.upper())

    if not any(getattr(handler, "negotiation_handler", False) for handler in package_logger.handlers):
        handler = logging.StreamHandler()
        handler.negotiation_handler = True
        handler.setFormatter(StructuredFormatter() if json_format else logging.Formatter(PLAIN_FORMAT))
        handler.addFilter(RequestIdFilter())
        package_logger.addHandler(handler)

    return package_logger
