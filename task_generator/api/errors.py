"""
Exception handlers.

Maps the exception hierarchy and request validation errors to the JSON
error contract: {error, details}.

Dependencies: fastapi, task_generator.core.exceptions
System role: Error boundary of the HTTP API
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_generator.core.exceptions import TaskGeneratorException
from task_generator.models.common import ErrorResponse

logger = logging.getLogger(__name__)

GENERATION_ERROR_MESSAGE = "Error generating PDF"


async def task_generator_exception_handler(
    request: Request, exc: TaskGeneratorException
) -> JSONResponse:
    """Client errors echo their message; server errors carry it as details."""
    if exc.status_code < 500:
        logger.warning(
            f"{request.method} {request.url.path} rejected: {exc.message}",
            extra={"details": exc.details},
        )
        body = ErrorResponse(error=exc.message)
    else:
        logger.error(
            f"Error in {request.url.path} endpoint: {exc}",
            extra={"error_type": type(exc).__name__, "details": exc.details},
        )
        body = ErrorResponse(error=GENERATION_ERROR_MESSAGE, details=exc.message)

    return JSONResponse(body.model_dump(), status_code=exc.status_code)


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies are plain 400s."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    details = f"{location}: {message}" if location else message

    logger.warning(f"{request.method} {request.url.path} validation failed: {details}")
    return JSONResponse(
        ErrorResponse(error="Invalid request", details=details).model_dump(),
        status_code=400,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(TaskGeneratorException, task_generator_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
