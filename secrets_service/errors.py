"""JSON error envelope and exception handlers."""
import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Request failed"


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Build the ``{"error": message}`` response used by every failure path."""
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register handlers so every error leaves as a JSON envelope."""

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = (
            exc.detail
            if isinstance(exc.detail, str)
            else _status_phrase(exc.status_code)
        )
        return error_response(exc.status_code, message, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def _validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "Invalid request body for %s %s: %s",
            request.method,
            request.url.path,
            [error.get("type") for error in exc.errors()],
        )
        return error_response(400, INVALID_BODY_MESSAGE)

    @app.exception_handler(Exception)
    async def _unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(
            "Unhandled exception method=%s path=%s",
            request.method,
            request.url.path,
        )
        return error_response(500, "Internal server error")
