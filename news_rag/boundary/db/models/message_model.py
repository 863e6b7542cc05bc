"""
Chat message ORM model.

One turn of a conversation. Assistant turns carry an immutable snapshot of
the articles they cited.

Dependencies: sqlalchemy, news_rag.boundary.db.base
System role: Chat transcript persistence
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from news_rag.boundary.db.base import Base, utc_now


class ChatMessageModel(Base):
    """
    Chat message ORM model.

    The integer primary key grows with insertion order and breaks ties
    between messages sharing a created_at value.

    Attributes:
        id: Autoincrement primary key
        session_id: Owning session UUID
        body: Message text
        is_user: True for user turns, False for assistant turns
        created_at: Creation timestamp (UTC)
        sources: List of {title, url, source} dicts, assistant turns only
    """

    __tablename__ = "chat_messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("sessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    is_user: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    sources: Mapped[list[dict] | None] = mapped_column(JSON, nullable=True, default=None)

    session = relationship("SessionModel", back_populates="messages")
