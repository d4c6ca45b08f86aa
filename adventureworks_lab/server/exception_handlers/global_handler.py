"""
Catch-all handler for unhandled exceptions.

Anything an endpoint does not handle itself ends up here. The client gets
a 500 body with an ``error_id``; the log line with the same id carries the
request context and the traceback. Errors raised by the AdventureWorks
database driver (unreachable server, failed login, bad statement) are
logged as database errors together with the failing statement, and the
body says so.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError

from adventureworks_lab.core.logging_config import get_logger

logger = get_logger(__name__)


def _request_context(request: Request) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "query_params": dict(request.query_params),
        "client": request.client.host if request.client else "unknown",
    }


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unhandled exception and answer with a 500.

    Args:
        request: The request being served when the exception was raised
        exc: The unhandled exception

    Returns:
        JSON body with ``detail``, ``error_id`` and ``error_type``
    """
    error_id = id(exc)
    error_type = type(exc).__name__
    extra = {
        "error_id": error_id,
        "error_type": error_type,
        "traceback": traceback.format_exc(),
        **_request_context(request),
    }

    if isinstance(exc, DBAPIError):
        reason = exc.orig if exc.orig is not None else exc
        logger.error(
            f"Database error [{error_id}] in {request.method} {request.url.path}: {reason}",
            exc_info=True,
            extra={**extra, "statement": exc.statement},
        )
        detail = "Database error"
    else:
        logger.error(
            f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {exc}",
            exc_info=True,
            extra=extra,
        )
        detail = "Internal server error"

    return JSONResponse(status_code=500, content={"detail": detail, "error_id": error_id, "error_type": error_type})


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the catch-all handler on ``app``."""
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
