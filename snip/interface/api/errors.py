"""Exception handlers mapping domain errors to HTTP responses.

Every NotFoundError produces the same body whatever its cause, so a
missing item and an unreadable one cannot be told apart by a client.
"""

import sys

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from snip.domain.error import (
    AuthenticationRequiredError,
    InvalidInputError,
    NotFoundError,
)

NOT_FOUND_DETAIL = "Not found"
INTERNAL_ERROR_DETAIL = "Internal server error"


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logfire.info("Not found", path=request.url.path, resource=exc.resource)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": NOT_FOUND_DETAIL},
    )


async def invalid_input_handler(
    request: Request, exc: InvalidInputError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def authentication_required_handler(
    request: Request, exc: AuthenticationRequiredError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": str(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure in full and return an opaque 500."""
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
        _exc_info=sys.exc_info(),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(
        AuthenticationRequiredError, authentication_required_handler
    )
    app.add_exception_handler(Exception, unhandled_error_handler)
