"""
Session ORM model.

Represents a conversation scope that owns an ordered list of chat messages.

Dependencies: sqlalchemy, news_rag.boundary.db.base
System role: Session persistence for chat context management
"""

from sqlalchemy.orm import relationship

from news_rag.boundary.db.base import Base, UUIDMixin, TimestampMixin


class SessionModel(Base, UUIDMixin, TimestampMixin):
    """
    Session ORM model.

    Clearing a session removes its messages but keeps this row, so the
    session stays usable afterwards. Deleting the row cascades to messages.

    Attributes:
        id: UUID primary key (auto-generated)
        created_at: Session creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)

    Relationships:
        messages: One-to-many with ChatMessageModel (cascade delete on session removal)
    """

    __tablename__ = "sessions"

    messages = relationship(
        "ChatMessageModel",
        back_populates="session",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
