"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, task_generator.api, task_generator.observability, task_generator.configs
System role: Application initialization and configuration
"""

import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_generator import __version__
from task_generator.api import api_router
from task_generator.api.deps import get_service_cache
from task_generator.api.errors import register_exception_handlers
from task_generator.configs import get_settings
from task_generator.observability.logger import configure_logging
from task_generator.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def _log_unhandled_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """Log failures of orphaned tasks instead of letting them go unnoticed."""
    exception = context.get("exception")
    logger.error(
        f"Unhandled asynchronous error: {context.get('message')}",
        exc_info=exception,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.get_running_loop().set_exception_handler(_log_unhandled_exception)

    if not settings.llm.api_key:
        logger.warning("Warning: OPENAI_API_KEY environment variable is not set")

    logger.info("Application startup complete")

    yield

    get_service_cache().clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="Programming Task Generator",
        description="Generates programming task PDFs from a pattern, with optional Mermaid diagrams",
        version=__version__,
        lifespan=lifespan,
    )

    # Added first = last to execute
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    settings = get_settings()
    logger.info(f"Server running on port {settings.server.port}")
    uvicorn.run(
        "task_generator.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
