"""
Ingestion domain models and schemas.

Dependencies: pydantic
System role: Ingestion API contracts
"""

from pydantic import BaseModel


class IngestionResult(BaseModel):
    """Outcome of one ingestion run."""

    count: int = 0
    success: bool = True
    message: str | None = None
    failed_sources: list[str] = []


class IngestResponse(BaseModel):
    """Response schema for the ingest endpoint."""

    success: bool
    articlesIngested: int
    message: str | None = None
