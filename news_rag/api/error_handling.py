"""
Error-to-response mapping.

Registers exception handlers that turn domain errors into the
{"error": message} JSON body used by every endpoint.

Dependencies: fastapi, news_rag.core.exceptions
System role: Uniform HTTP error responses
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from news_rag.core.exceptions import (
    NewsRagException,
    SessionNotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error payload response."""
    return JSONResponse(status_code=status_code, content={"error": message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("Invalid request", extra={"path": request.url.path, "details": exc.details})
    return error_response(status.HTTP_400_BAD_REQUEST, exc.message)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("Malformed request body", extra={"path": request.url.path})
    messages = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return error_response(status.HTTP_400_BAD_REQUEST, messages or "Invalid request")


async def session_not_found_handler(request: Request, exc: SessionNotFoundError) -> JSONResponse:
    logger.warning("Session not found", extra={"details": exc.details})
    return error_response(status.HTTP_404_NOT_FOUND, exc.message)


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(f"Store failure on {request.url.path}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def news_rag_error_handler(request: Request, exc: NewsRagException) -> JSONResponse:
    logger.error(f"Unhandled application error on {request.url.path}: {exc}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error on {request.url.path}", exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """
    Attach domain exception handlers to the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SessionNotFoundError, session_not_found_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(NewsRagException, news_rag_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
