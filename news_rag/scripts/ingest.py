"""
Command-line ingestion run.

Runs one ingestion pass over the configured feeds outside the HTTP server.

Usage:
    python -m news_rag.scripts.ingest
"""

import asyncio
import logging
import sys

from news_rag.application.services.ingestion_service import IngestionService
from news_rag.boundary.db import get_async_engine, get_async_session_factory, init_models
from news_rag.configs import get_settings
from news_rag.observability import configure_logging

logger = logging.getLogger(__name__)


async def run_ingestion() -> bool:
    """Create tables if needed, ingest once, and report the outcome."""
    settings = get_settings()
    await init_models()

    SessionFactory = get_async_session_factory()
    try:
        async with SessionFactory() as db:
            service = IngestionService.from_settings(db, settings.feeds)
            result = await service.ingest()
    finally:
        await get_async_engine().dispose()

    if result.failed_sources:
        logger.warning(f"Sources that failed: {', '.join(result.failed_sources)}")
    logger.info(f"Ingestion finished: success={result.success} articles={result.count}")
    return result.success


def main() -> None:
    configure_logging(get_settings().log_level)
    ok = asyncio.run(run_ingestion())
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
