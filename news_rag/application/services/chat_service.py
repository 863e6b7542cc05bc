"""
Chat service for retrieval-augmented Q&A.

Runs one chat turn as a fixed sequence: validate, persist the user turn,
retrieve, build the prompt, generate, persist the assistant turn, respond.
Only validation and the user-turn write can fail the request; retrieval
and generation degrade to empty context and fallback text.

Dependencies: news_rag.core, news_rag.application.services.session_service
System role: Chat service orchestration layer
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.application.services.session_service import SessionService
from news_rag.boundary.db.models.document_model import DocumentModel
from news_rag.core.citation_builder import CitationBuilder
from news_rag.core.exceptions import SessionNotFoundError, StoreError, ValidationError
from news_rag.core.generation_client import GenerationClient
from news_rag.core.prompt_builder import build_prompt
from news_rag.core.retriever import Retriever
from news_rag.models.chat import ChatResponse

logger = logging.getLogger(__name__)


def parse_session_id(session_id: str | None) -> UUID:
    """
    Validate a session identifier from a request.

    Args:
        session_id: Raw identifier string

    Returns:
        UUID: Parsed session ID

    Raises:
        ValidationError: If the identifier is missing or not a UUID
    """
    if not session_id or not str(session_id).strip():
        raise ValidationError("Session ID is required", field="sessionId")
    try:
        return UUID(str(session_id).strip())
    except ValueError as e:
        raise ValidationError(f"Invalid session ID: {session_id}", field="sessionId") from e


class ChatService:
    """
    Chat service for conversational Q&A.

    Coordinates session validation, message persistence, keyword retrieval,
    prompt building and generation for a single turn.
    """

    def __init__(
        self,
        db: AsyncSession,
        retriever: Retriever,
        generation_client: GenerationClient,
        session_service: SessionService | None = None,
        citation_builder: CitationBuilder | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            db: AsyncSession for database operations
            retriever: Relevance retriever
            generation_client: Fail-soft LLM client
            session_service: Session/message persistence, built from db if omitted
            citation_builder: Citation snapshot builder
        """
        self.db = db
        self.retriever = retriever
        self.generation_client = generation_client
        self.session_service = session_service or SessionService(db)
        self.citation_builder = citation_builder or CitationBuilder()

    async def process_chat(self, session_id: str | None, message: str | None) -> ChatResponse:
        """
        Process one chat turn.

        Args:
            session_id: Session identifier from the request
            message: User's message

        Returns:
            ChatResponse: Generated (or fallback) answer with cited sources

        Raises:
            ValidationError: Missing or blank message, missing or malformed session ID
            SessionNotFoundError: Session was never created
            StoreError: User turn could not be persisted
        """
        # Step 1: Receive
        if message is None or not message.strip():
            raise ValidationError("Message is required", field="message")
        session_uuid = parse_session_id(session_id)
        if not await self.session_service.session_exists(session_uuid):
            raise SessionNotFoundError(str(session_uuid))

        logger.info(f"Processing chat message for session: {session_uuid}")

        # Step 2: Persist user turn (fatal on failure)
        await self.session_service.add_message(session_uuid, message, is_user=True)

        # Step 3: Retrieve
        documents = await self._retrieve(message)

        # Step 4: Assemble
        prompt = build_prompt(message, documents)

        # Step 5: Generate
        answer = await self.generation_client.generate(prompt)

        # Step 6: Persist bot turn
        citations = self.citation_builder.build_citations(documents)
        try:
            await self.session_service.add_message(
                session_uuid,
                answer,
                is_user=False,
                sources=[citation.model_dump() for citation in citations],
            )
        except StoreError as e:
            logger.error(f"Failed to store assistant message for session {session_uuid}: {e}")

        # Step 7: Respond
        return ChatResponse(response=answer, sources=citations)

    async def _retrieve(self, message: str) -> list[DocumentModel]:
        try:
            return await self.retriever.retrieve(message)
        except Exception as e:
            logger.error(f"Retrieval failed, continuing without context: {type(e).__name__}: {e}")
            try:
                await self.db.rollback()
            except SQLAlchemyError as rollback_error:
                logger.error(f"Rollback after failed retrieval also failed: {rollback_error}")
            return []
