"""
Error taxonomy and exception handlers for the books API.

Every error leaves the API as an ``ErrorResponse`` body. Clients only see
404 with the not-found message or a generic 400 "Invalid Request"; the
underlying detail is logged.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models import ErrorResponse

logger = structlog.get_logger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid Request"


class BookAPIError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookNotFoundError(BookAPIError):
    """Raised when no book has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, book_id: int):
        super().__init__(f"Book not found - {book_id}")
        self.book_id = book_id


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Build a JSON error response in the shared ``ErrorResponse`` shape."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message, status_code=status_code).model_dump(by_alias=True),
        headers=headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on the FastAPI application.

    Call before adding CORS so unexpected errors are handled inside it.
    """

    @app.exception_handler(BookAPIError)
    async def book_api_exception_handler(request: Request, exc: BookAPIError):
        """Handle domain errors raised by the store and routes."""
        logger.warning(
            "Request failed",
            error=exc.message,
            status_code=exc.status_code,
            method=request.method,
            path=request.url.path
        )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle invalid path parameters and request bodies."""
        logger.warning(
            "Request validation failed",
            errors=[
                {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
                for error in exc.errors()
            ],
            method=request.method,
            path=request.url.path
        )
        return error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions such as unknown routes."""
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.middleware("http")
    async def unexpected_error_middleware(request: Request, call_next):
        """Turn unexpected exceptions into a generic 400.

        Must sit inside the CORS middleware. Nothing is re-raised to the server.
        """
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unhandled exception",
                error=str(exc),
                error_type=type(exc).__name__,
                method=request.method,
                path=request.url.path
            )
            return error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)
