"""
Centralized exception handlers for the FastAPI application.

Every error leaves the API in the same shape:

    {"error": "Human-readable error message"}

Module exceptions carry their HTTP status through the shared base class
they inherit from (see ``shared.exceptions``). Unexpected exceptions are
logged with their traceback and reported as a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import AccountKitError, AuthenticationError

logger = logging.getLogger(__name__)

INVALID_BODY = "Invalid request body"
INTERNAL_ERROR = "Internal server error"


def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance
    """

    @app.exception_handler(AccountKitError)
    async def accountkit_exception_handler(
        request: Request,
        exc: AccountKitError,
    ) -> JSONResponse:
        """Map module exceptions to their status and message."""
        logger.info(
            "%s %s -> %d %s (code=%s)",
            request.method,
            request.url.path,
            exc.status_code,
            exc.message,
            exc.code,
        )
        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Reject bodies that are not JSON objects.

        Field contents are checked by the validation rules, so anything
        reaching this handler is a malformed, missing or wrongly shaped body.
        """
        logger.info(
            "Rejected request body on %s %s: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Routing errors (404, 405) in the standard envelope."""
        return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all: details are logged, never returned."""
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)
