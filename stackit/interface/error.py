"""Interface layer error handling.

Translates domain, token and persistence errors raised while serving a
request into JSON responses of the form ``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from stackit.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from stackit.persistence.error import StoreError
from stackit.util.jwt import JWTError

DATABASE_ERROR_MESSAGE = "Database error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON error body shared by all handlers."""
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_request_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        loc = ".".join(str(part) for part in err.get("loc", ())[1:])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts) or "Invalid request"


async def handle_validation_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, _format_request_errors(exc))


async def handle_authentication_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_401_UNAUTHORIZED, str(exc))


async def handle_forbidden_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_403_FORBIDDEN, str(exc))


async def handle_not_found_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def handle_store_error(request: Request, exc: Exception) -> JSONResponse:
    """Report storage failures without leaking driver details."""
    logfire.error(
        "Database error while serving request",
        path=request.url.path,
        error=str(exc),
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, DATABASE_ERROR_MESSAGE
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(ConflictError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(AuthenticationError, handle_authentication_error)
    app.add_exception_handler(NotAuthorizedError, handle_forbidden_error)
    app.add_exception_handler(JWTError, handle_forbidden_error)
    app.add_exception_handler(NotFoundError, handle_not_found_error)
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)
