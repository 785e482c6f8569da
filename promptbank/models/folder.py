"""Folder model."""

from sqlalchemy import Column, Index, String, DateTime, ForeignKey

from ..database import Base
from ._common import new_id, utcnow


class Folder(Base):
    """Named, colored grouping of prompts owned by one user."""

    __tablename__ = "folders"
    __table_args__ = (
        Index("ix_folders_user_created", "user_id", "created_at"),
    )

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    color = Column(String(32), nullable=False)

    # Immutable
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
