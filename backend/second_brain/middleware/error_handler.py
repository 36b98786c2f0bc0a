"""Exception handlers

Maps internal errors to the public JSON error shape. Internal causes are
logged here and never sent to the client.
"""
import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..exceptions import AppError, ValidationFailedError

logger = logging.getLogger(__name__)


def create_error_response(message: str, status_code: int, errors: list = None) -> JSONResponse:
    """Standard error body"""
    content = {
        "status": "error",
        "message": message,
    }
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def format_validation_errors(exc: RequestValidationError) -> list:
    """Per-field detail without echoing the submitted values"""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value"),
            "type": err.get("type", "value_error"),
        })
    return errors


def setup_exception_handlers(app):
    """Register exception handlers on the FastAPI app."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"[Error] {request.method} {request.url.path}: {exc!r}")
        else:
            logger.info(f"[Error] {request.method} {request.url.path}: {exc!r}")
        errors = exc.errors if isinstance(exc, ValidationFailedError) else None
        return create_error_response(exc.message, exc.status_code, errors=errors)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return await app_error_handler(
            request, ValidationFailedError(errors=format_validation_errors(exc), reason="request body")
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return create_error_response(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"[Error] unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=exc,
        )
        return create_error_response("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)
