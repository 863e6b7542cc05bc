"""Chat API endpoints.

Routes:
- POST /chat - Send a message and receive a grounded answer with sources

Dependencies: news_rag.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from news_rag.api.deps import get_chat_service
from news_rag.application.services.chat_service import ChatService
from news_rag.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Send chat message to a session.

    Errors are mapped by the application exception handlers:
    400 for validation failures, 404 for unknown sessions, 500 when the
    user message cannot be stored.

    Args:
        request: ChatRequest with message and sessionId
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer with cited sources
    """
    return await chat_service.process_chat(
        session_id=request.sessionId,
        message=request.message,
    )
