"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, news_rag.api, news_rag.observability, news_rag.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from news_rag.api.deps import get_service_cache
from news_rag.api.error_handling import register_error_handlers
from news_rag.api.routers import (
    chat_router,
    health_router,
    ingest_router,
    sessions_router,
)
from news_rag.boundary.db import get_async_engine, init_models
from news_rag.configs import get_settings
from news_rag.observability import RequestLoggingMiddleware, configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, creates missing tables and builds the process-wide
    collaborators once at startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    await init_models()
    logger.info("Database schema ready")

    cache = get_service_cache()
    if not cache.generation_client.configured:
        logger.warning("Generative backend not configured, chat answers will use the fallback text")
    _ = cache.feed_client
    logger.info("Application startup complete")

    yield

    cache.clear()
    await get_async_engine().dispose()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="News RAG API",
        description="Retrieval-augmented news chat with session-scoped history",
        version="0.1.0",
        debug=get_settings().debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Pre-flight OPTIONS requests are answered here with 200
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(sessions_router)
    app.include_router(chat_router)
    app.include_router(ingest_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "news_rag.main:app",
        host="0.0.0.0",
        port=8000,
    )
