"""Translation of internal errors into HTTP error responses.

Every non-2xx response produced by the API carries the same body:
``{timestamp, message, status, error, path}``.
"""

from datetime import UTC, datetime
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.user_api.core.exceptions import ResourceConflictError, ResourceNotFoundError

CONFLICT_MESSAGE = (
    "Database constraint violation. "
    "A resource with the provided email may already exist."
)
INTERNAL_ERROR_MESSAGE = "An unexpected internal server error occurred."


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    message: str
    status: int
    error: str
    path: str


def error_response(
    request: Request,
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        status=int(status_code),
        error=HTTPStatus(status_code).phrase,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


def internal_error_response(
    request: Request, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Generic 500 response; details stay in the server logs."""
    return error_response(
        request, HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, headers
    )


async def handle_not_found(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    logger.warning("Resource not found: {}", exc)
    return error_response(request, HTTPStatus.NOT_FOUND, str(exc))


async def handle_conflict(request: Request, exc: ResourceConflictError) -> JSONResponse:
    logger.warning("Data integrity violation: {}", exc)
    return error_response(request, HTTPStatus.CONFLICT, CONFLICT_MESSAGE)


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed input maps to the generic 500
    logger.bind(errors=exc.errors()).warning("Request validation failed")
    return internal_error_response(request)


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(
        request, exc.status_code, str(exc.detail), headers=exc.headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error mapping on the application."""
    app.add_exception_handler(ResourceNotFoundError, handle_not_found)
    app.add_exception_handler(ResourceConflictError, handle_conflict)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
