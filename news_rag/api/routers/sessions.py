"""
Session API endpoints.

Routes:
- GET /session?action=create - Create new session
- GET /session?action=history&sessionId=... - Get chat history
- GET /session?action=clear&sessionId=... - Delete all messages of a session

Dependencies: news_rag.application.services.session_service, news_rag.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from news_rag.api.deps import get_session_service
from news_rag.api.error_handling import error_response
from news_rag.application.services.chat_service import parse_session_id
from news_rag.application.services.session_service import SessionService
from news_rag.models.session import (
    ClearSessionResponse,
    CreateSessionResponse,
    MessageResponse,
    SessionHistoryResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"])


@router.get("/session", response_model=None)
async def session_action(
    action: str | None = None,
    sessionId: str | None = None,
    session_service: SessionService = Depends(get_session_service),
) -> CreateSessionResponse | SessionHistoryResponse | ClearSessionResponse | JSONResponse:
    """
    Dispatch a session action.

    Args:
        action: One of create, history, clear
        sessionId: Session identifier, required for history and clear
        session_service: Injected SessionService

    Returns:
        Action-specific payload, or 400 {"error": "Invalid action"}
    """
    if action == "create":
        session_id = await session_service.create_session()
        return CreateSessionResponse(sessionId=str(session_id))

    if action == "history" and sessionId:
        messages = await session_service.get_history(parse_session_id(sessionId))
        return SessionHistoryResponse(
            messages=[MessageResponse.model_validate(msg) for msg in messages],
        )

    if action == "clear" and sessionId:
        await session_service.clear_history(parse_session_id(sessionId))
        return ClearSessionResponse()

    return error_response(400, "Invalid action")
