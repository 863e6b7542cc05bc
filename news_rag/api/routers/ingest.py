"""
Ingestion API endpoints.

Routes:
- POST /ingest - Fetch all configured feeds and upsert their articles

Dependencies: news_rag.application.services.ingestion_service
System role: Ingestion trigger HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from news_rag.api.deps import get_ingestion_service
from news_rag.application.services.ingestion_service import IngestionService
from news_rag.models.ingest import IngestResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingest"])


@router.post("/ingest", response_model=IngestResponse)
async def ingest(
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> IngestResponse | JSONResponse:
    """
    Run one ingestion pass.

    Args:
        ingestion_service: Injected IngestionService

    Returns:
        IngestResponse on success, 500 {"success": false, "error"} when the
        bulk write failed
    """
    result = await ingestion_service.ingest()
    if not result.success:
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": result.message or "Ingestion failed"},
        )

    return IngestResponse(
        success=True,
        articlesIngested=result.count,
        message=result.message,
    )
