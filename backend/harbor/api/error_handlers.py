"""Error Handlers - global exception handlers for the Harbor API.

Invariants:
    - HarborError -> its own status with {"Error": message}
    - RequestValidationError -> 400 with the missing-attributes message
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Registered from main.py in one call; the three layers mirror the error
      taxonomy: domain, request validation, unhandled
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from harbor.core.errors import HarborError, RequestDataError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_harbor_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_harbor_error_handler(app: FastAPI) -> None:

    @app.exception_handler(HarborError)
    async def harbor_error_handler(request: Request, exc: HarborError):
        """Handle all Harbor domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"HarborError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=RequestDataError().to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"Error": "An unexpected error occurred"},
        )
