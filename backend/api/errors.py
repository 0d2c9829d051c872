"""
Exception handlers.

The only place that maps failures to HTTP status codes and bodies.
Protocol failures use the game client's shape
``{"error": ..., "errorMessage": ...}``; account API failures use
``{"error": ..., "message": ...}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.exceptions import (
    AuthServerError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from modules.auth.exceptions import ErrorKind, ProtocolError
from modules.auth.models import ErrorResponse

logger = logging.getLogger(__name__)

ILLEGAL_ARGUMENT = "IllegalArgumentException"
FORBIDDEN_OPERATION = "ForbiddenOperationException"
INTERNAL_SERVER_ERROR = "InternalServerError"

PROTOCOL_STATUS: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.INVALID_ARGUMENT: (status.HTTP_400_BAD_REQUEST, ILLEGAL_ARGUMENT),
    ErrorKind.INVALID_CREDENTIALS: (status.HTTP_403_FORBIDDEN, FORBIDDEN_OPERATION),
    ErrorKind.INVALID_TOKEN: (status.HTTP_403_FORBIDDEN, FORBIDDEN_OPERATION),
    ErrorKind.TOKEN_EXPIRED: (status.HTTP_403_FORBIDDEN, FORBIDDEN_OPERATION),
    ErrorKind.NO_PROFILES: (status.HTTP_403_FORBIDDEN, FORBIDDEN_OPERATION),
    ErrorKind.USER_NOT_FOUND: (status.HTTP_403_FORBIDDEN, FORBIDDEN_OPERATION),
    ErrorKind.FORBIDDEN: (status.HTTP_403_FORBIDDEN, FORBIDDEN_OPERATION),
    ErrorKind.INTERNAL_ERROR: (status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR),
}


def protocol_error_payload(error: str, message: str) -> dict[str, str]:
    return ErrorResponse(error=error, error_message=message).model_dump(by_alias=True)


def _account_error_status(exc: AuthServerError) -> int:
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, AuthorizationError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def protocol_exception_handler(request: Request, exc: ProtocolError):
    """Render a protocol failure in the game client's error shape."""
    status_code, error = PROTOCOL_STATUS[exc.kind]
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content=protocol_error_payload(error, exc.message),
    )


async def app_exception_handler(request: Request, exc: AuthServerError):
    """Render an account API failure."""
    return JSONResponse(
        status_code=_account_error_status(exc),
        content=exc.to_dict(),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are illegal arguments in the protocol's terms."""
    fields = [
        ".".join(str(item) for item in err.get("loc", []) if item != "body")
        for err in exc.errors()
    ]
    message = "Invalid request."
    if fields:
        message = f"Invalid request field(s): {', '.join(f for f in fields if f)}."
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=protocol_error_payload(ILLEGAL_ARGUMENT, message),
    )


async def unexpected_exception_handler(request: Request, exc: Exception):
    """Log the failure and hide its details from the client."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=protocol_error_payload(
            INTERNAL_SERVER_ERROR, "An internal server error occurred."
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application."""
    app.add_exception_handler(ProtocolError, protocol_exception_handler)
    app.add_exception_handler(AuthServerError, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
