"""
Session service orchestrator.

Coordinates session lifecycle and the ordered message history of each
session. sessionId is the only partition key; no query crosses sessions.

Dependencies: news_rag.boundary.db.CRUD, news_rag.core.exceptions
System role: Session use case orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.boundary.db.CRUD.message_crud import message_crud
from news_rag.boundary.db.CRUD.session_crud import session_crud
from news_rag.boundary.db.models.message_model import ChatMessageModel
from news_rag.core.exceptions import StoreError

logger = logging.getLogger(__name__)


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_session(self) -> UUID:
        """
        Create a new session.

        Returns:
            UUID: Created session ID

        Raises:
            StoreError: If the session row cannot be written
        """
        try:
            session = await session_crud.create(self.db)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise StoreError(f"Failed to create session: {e}", operation="insert") from e

        logger.info(f"Created new session: {session.id}")
        return session.id

    async def session_exists(self, session_id: UUID) -> bool:
        """
        Check whether a session was created.

        Raises:
            StoreError: If the store cannot be queried
        """
        try:
            return await session_crud.exists(self.db, session_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to look up session: {e}", operation="query") from e

    async def get_history(self, session_id: UUID) -> Sequence[ChatMessageModel]:
        """
        Get all messages of a session in conversation order.

        Existence is not validated; unknown sessions have an empty history.

        Args:
            session_id: Session UUID

        Returns:
            Sequence[ChatMessageModel]: Messages ordered by (created_at, id)

        Raises:
            StoreError: If the store cannot be queried
        """
        try:
            messages = await message_crud.get_by_session_id(self.db, session_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load session history: {e}", operation="query") from e

        logger.info(f"Retrieved {len(messages)} messages for session: {session_id}")
        return messages

    async def clear_history(self, session_id: UUID) -> None:
        """
        Delete all messages of a session, keeping the session itself.

        Idempotent: clearing an empty or unknown session succeeds.

        Args:
            session_id: Session UUID

        Raises:
            StoreError: If the delete is rejected
        """
        try:
            deleted = await message_crud.delete_by_session_id(self.db, session_id)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise StoreError(f"Failed to clear session: {e}", operation="delete") from e

        logger.info(f"Cleared {deleted} messages for session: {session_id}")

    async def add_message(
        self,
        session_id: UUID,
        body: str,
        is_user: bool,
        sources: list[dict] | None = None,
    ) -> ChatMessageModel:
        """
        Append a message and commit it immediately.

        Args:
            session_id: Owning session UUID
            body: Message text
            is_user: True for user turns
            sources: Citation snapshots for assistant turns

        Returns:
            ChatMessageModel: Persisted message

        Raises:
            StoreError: If the insert is rejected
        """
        try:
            message = await message_crud.add_message(
                self.db,
                session_id=session_id,
                body=body,
                is_user=is_user,
                sources=sources,
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._rollback()
            raise StoreError(f"Failed to store message: {e}", operation="insert") from e
        return message

    async def _rollback(self) -> None:
        # Rollback failures are only logged; callers raise StoreError for the original failure
        try:
            await self.db.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")
