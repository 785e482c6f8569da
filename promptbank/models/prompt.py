"""Prompt model."""

from sqlalchemy import Column, Index, String, Text, DateTime, ForeignKey, JSON

from ..database import Base
from ._common import new_id, utcnow

TITLE_MAX_LENGTH = 200


class Prompt(Base):
    """Titled block of reusable text, filed in exactly one folder."""

    __tablename__ = "prompts"
    __table_args__ = (
        Index("ix_prompts_user_updated", "user_id", "updated_at"),
        Index("ix_prompts_folder_id", "folder_id"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Deleting the folder deletes its prompts at the database level.
    folder_id = Column(
        String(36),
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=False,
    )

    title = Column(String(TITLE_MAX_LENGTH), nullable=False)
    content = Column(Text, nullable=False)

    # Ordered, stored exactly as submitted
    tags = Column(JSON, default=list, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
