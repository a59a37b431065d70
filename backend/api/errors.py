"""
Exception handlers.

Maps the application exception hierarchy onto HTTP responses with a
consistent body: {"error": <code>, "message": <text>, "details": {...}}.
Anything else is a backend failure and is reported as a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shared.exceptions import (
    WhyNotError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
)

logger = logging.getLogger(__name__)

# Checked in order; first match wins
STATUS_BY_ERROR: list[tuple[type[WhyNotError], int]] = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: WhyNotError) -> int:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def handle_app_error(request: Request, exc: WhyNotError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s refused: %s", request.method, request.url.path, exc.code)

    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed with backend error", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "INTERNAL_ERROR", "message": "Internal server error", "details": {}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WhyNotError, handle_app_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
