"""Error Handlers — the single terminal stage that turns failures into HTTP responses.

Invariants:
    - Every error body is exactly {"error": <message>, "status": <code>}
    - The status line always equals the body's "status" field
    - ApiError without a status code → 500
    - translate_error never raises
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - translate_error is shared by render() (handler Failures) and the global
      exception handlers (failures outside a handler): one body shape, one place
    - Four-layer registration: ApiError (domain), RequestValidationError (Pydantic),
      HTTPException (routing: 404/405), Exception (catch-all)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_api.core.errors import ApiError

logger = logging.getLogger(__name__)


def translate_error(error: ApiError) -> JSONResponse:
    """Convert an ApiError into the uniform JSON error response."""
    return JSONResponse(
        status_code=error.http_status, content=error.to_response(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Handle ApiErrors raised outside a request handler."""
        logger.error(
            f"ApiError: {exc.message}",
            extra={
                "error_code": exc.code,
                "status_code": exc.http_status,
                "path": request.url.path,
            },
        )
        return translate_error(exc)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Malformed JSON: 400 in the uniform shape."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return translate_error(ApiError(
            "Invalid request body", status.HTTP_400_BAD_REQUEST,
            "VALIDATION_ERROR",
        ))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Unknown routes and unsupported methods."""
        response = translate_error(
            ApiError(str(exc.detail), exc.status_code, "HTTP_ERROR"),
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return translate_error(ApiError(
            "Internal Server Error",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_ERROR",
        ))
