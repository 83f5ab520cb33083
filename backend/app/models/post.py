"""
Inkpost Backend — Post SQLAlchemy Model
=========================================

What:  ORM model representing the `posts` table, one row per blog post.
Why:   Maps Python objects to store records for PostStore's CRUD calls.
Who:   Used by PostStore; created on startup by init_models().

Table Design Rationale:
    - UUID primary key: generated on insert, never reassigned
    - tags: JSON array so the ordered label list is stored as one document field
    - created_at / updated_at: UTC, set by the model on insert and update
"""

import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy import JSON, DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """
    A blog post.

    Lifecycle:
        1. Inserted by PostStore.create (id, created_at, updated_at assigned)
        2. Replaced field-by-field by PostStore.update_by_id (updated_at refreshed)
        3. Removed by PostStore.delete_by_id
    """

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)

    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    __table_args__ = (
        Index("idx_posts_category", "category"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title='{self.title}', category='{self.category}')>"
