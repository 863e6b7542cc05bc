"""
Chat domain models and schemas.

Request/response schemas for chat operations. Field names follow the
JSON wire format used by the web client.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field

from news_rag.models.citation import SourceCitation


class ChatRequest(BaseModel):
    """
    Request schema for chat messages.

    Both fields are optional at the schema level so that missing values
    reach the orchestrator and are reported as a 400 validation error.
    """

    message: str | None = Field(default=None, description="User question or message")
    sessionId: str | None = Field(default=None, description="Session identifier")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    response: str
    sources: list[SourceCitation]
