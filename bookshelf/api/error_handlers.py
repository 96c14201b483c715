"""Error Handlers: global exception handlers for the Bookshelf API.

Invariants:
    - Every error response uses {"error": {"message": ..., "status": ...}}
    - BookshelfError → its own http_status and public message
    - RequestValidationError → 400 with a list of messages
    - StarletteHTTPException (unknown route, bad method) → same envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Extracted from main.py: main only wires, handlers live here
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.core.errors import BookshelfError, ErrorSeverity

logger = logging.getLogger(__name__)


def error_envelope(message: str | list[str], status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_bookshelf_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_bookshelf_error_handler(app: FastAPI) -> None:
    """Register Bookshelf domain/store error handler."""

    @app.exception_handler(BookshelfError)
    async def bookshelf_error_handler(request: Request, exc: BookshelfError):
        """Handle all Bookshelf domain/store errors."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"BookshelfError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "isbn": exc.context.isbn,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies and parameters."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_envelope(
                _describe_request_errors(exc), status.HTTP_400_BAD_REQUEST,
            ),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register framework HTTP error handler (404 route, 405 method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_envelope(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_envelope(
                "Internal Server Error",
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            ),
        )


def _describe_request_errors(exc: RequestValidationError) -> list[str]:
    """Flatten Pydantic errors into 'location: message' strings."""
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
