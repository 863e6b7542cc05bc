"""
Chat message CRUD operations.

Session-scoped message persistence: every query is partitioned by
session_id and ordered by (created_at, id).

Dependencies: sqlalchemy, news_rag.boundary.db.models
System role: Chat transcript persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.boundary.db.models.message_model import ChatMessageModel
from news_rag.boundary.db.CRUD.base_crud import BaseCRUD


class MessageCRUD(BaseCRUD[ChatMessageModel]):
    """CRUD operations for ChatMessageModel."""

    def __init__(self) -> None:
        """Initialize MessageCRUD with ChatMessageModel."""
        super().__init__(ChatMessageModel)

    async def add_message(
        self,
        session: AsyncSession,
        session_id: UUID,
        body: str,
        is_user: bool,
        sources: list[dict] | None = None,
    ) -> ChatMessageModel:
        """
        Append a message to a session.

        Args:
            session: Async database session
            session_id: Owning session UUID
            body: Message text
            is_user: Authorship flag
            sources: Citation snapshots for assistant turns

        Returns:
            Created ChatMessageModel
        """
        return await self.create(
            session,
            session_id=session_id,
            body=body,
            is_user=is_user,
            sources=sources,
        )

    async def get_by_session_id(
        self,
        session: AsyncSession,
        session_id: UUID,
    ) -> Sequence[ChatMessageModel]:
        """
        Retrieve all messages for a session in conversation order.

        Args:
            session: Async database session
            session_id: Session UUID

        Returns:
            Messages ordered by creation time, insertion order on ties
        """
        stmt = (
            select(ChatMessageModel)
            .where(ChatMessageModel.session_id == session_id)
            .order_by(ChatMessageModel.created_at.asc(), ChatMessageModel.id.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def delete_by_session_id(self, session: AsyncSession, session_id: UUID) -> int:
        """
        Delete every message of a session.

        Args:
            session: Async database session
            session_id: Session UUID

        Returns:
            Number of deleted rows (0 for empty or unknown sessions)
        """
        stmt = delete(ChatMessageModel).where(ChatMessageModel.session_id == session_id)
        result = await session.execute(stmt)
        return result.rowcount or 0


message_crud = MessageCRUD()
