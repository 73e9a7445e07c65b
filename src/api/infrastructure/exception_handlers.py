"""Central mapping of domain exceptions to HTTP error responses.

Domain exceptions carry a machine-readable ``code`` attribute. Each
registered exception type is rendered as::

    {"detail": "<message>", "code": "<CODE>"}

with the status code it was registered under. Anything unregistered falls
through to FastAPI's default handling (500 for unexpected errors).
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


def error_body(exc: Exception) -> dict[str, str]:
    """Build the JSON error body for a domain exception."""
    return {
        "detail": str(exc),
        "code": getattr(exc, "code", type(exc).__name__),
    }


def _make_handler(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        logger.info(
            "domain_error_response",
            path=request.url.path,
            status_code=status_code,
            code=getattr(exc, "code", type(exc).__name__),
        )
        return JSONResponse(status_code=status_code, content=error_body(exc))

    return handle


def register_exception_handlers(
    app: FastAPI,
    status_by_exception: Mapping[type[Exception], int],
) -> None:
    """Register a JSON error handler for each domain exception type.

    Args:
        app: The FastAPI application
        status_by_exception: HTTP status code per exception type
    """
    for exc_type, status_code in status_by_exception.items():
        app.add_exception_handler(exc_type, _make_handler(status_code))
