"""
Session domain models and schemas.

Dependencies: pydantic
System role: Session API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from news_rag.models.citation import SourceCitation



class CreateSessionResponse(BaseModel):
    """Response schema for session creation."""

    sessionId: str


class MessageResponse(BaseModel):
    """Single chat message in history."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    session_id: uuid.UUID
    message: str = Field(validation_alias="body")
    is_user: bool
    created_at: datetime
    retrieved_sources: list[SourceCitation] | None = Field(
        default=None,
        validation_alias="sources",
    )


class SessionHistoryResponse(BaseModel):
    """Response schema for chat history."""

    messages: list[MessageResponse]


class ClearSessionResponse(BaseModel):
    """Response schema for clearing a session."""

    success: bool = True
    message: str = "Session cleared"
