"""
Exception handlers.
Every error leaves the API as {"error": ..., "message": ...}.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ephemeral_paste.exceptions import PasteError, ValidationError
from ephemeral_paste.models import BODY_MESSAGE, FIELD_MESSAGES

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def _paste_error_response(exc: PasteError) -> JSONResponse:
    return _error_response(exc.status_code, exc.error, exc.message)


def to_validation_error(exc: RequestValidationError) -> ValidationError:
    """Translate a pydantic request error into the message for the first failing field."""
    for err in exc.errors():
        loc = err.get("loc", ())
        if len(loc) > 1 and loc[1] in FIELD_MESSAGES:
            return ValidationError(FIELD_MESSAGES[loc[1]])
    return ValidationError(BODY_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Map application, framework and unexpected errors to JSON responses."""

    @app.exception_handler(PasteError)
    async def handle_paste_error(request: Request, exc: PasteError):
        return _paste_error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        error = to_validation_error(exc)
        logger.info(f"Rejected {request.method} {request.url.path}: {error.message}")
        return _paste_error_response(error)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error_response(404, "Not found", "Endpoint not found")
        return _error_response(exc.status_code, "HTTP error", str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return _error_response(500, "Internal server error", "An unexpected error occurred")
