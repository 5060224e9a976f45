"""
Exception handlers producing the ``{"success": false, "error": ...}`` envelope.

Register them with ``register_exception_handlers(app)``.
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_detector.core.exceptions import ExtractionError, StorageError
from content_detector.core.logging import get_logger

logger = get_logger(__name__)

# Constants for sanitized error messages
VALIDATION_ERROR_MSG = "Invalid data provided"
INVALID_REQUEST_MSG = "Invalid request data"
INTERNAL_ERROR_MSG = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handle HTTPException with standardized error response.

    Returns sanitized error message - does not expose internal error details.
    """
    detail = str(exc.detail) if exc.detail else "An error occurred"

    detail_lower = detail.lower()
    if "validation error" in detail_lower or "pydantic" in detail_lower:
        detail = VALIDATION_ERROR_MSG

    logger.error(
        "http_exception",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        detail=exc.detail,
    )
    return error_response(exc.status_code, detail)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error(
        "validation_exception",
        path=request.url.path,
        method=request.method,
        errors=exc.errors(),
    )
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, INVALID_REQUEST_MSG)


async def pydantic_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """
    Handle Pydantic model validation errors (internal validation, not request validation).
    """
    logger.error(
        "pydantic_validation_error",
        path=request.url.path,
        method=request.method,
        errors=str(exc),
        exc_info=True,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MSG)


async def extraction_error_handler(request: Request, exc: ExtractionError) -> JSONResponse:
    logger.warning("extraction_failed", path=request.url.path, error=exc.message)
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc.message)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(
        "storage_failed",
        path=request.url.path,
        method=request.method,
        error=exc.message,
    )
    return error_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc.message)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unexpected_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        exc_info=True,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MSG)


def register_exception_handlers(app):
    """
    Register all custom exception handlers with the FastAPI app.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Pydantic model validation errors (internal validation, not request validation)
    app.add_exception_handler(ValidationError, pydantic_validation_error_handler)

    # Collaborator failures
    app.add_exception_handler(ExtractionError, extraction_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    # Catch-all for any other exceptions
    app.add_exception_handler(Exception, generic_exception_handler)
