"""
Inkpost Backend — Post Store Gateway
======================================

What:  Thin wrapper over an AsyncSession exposing the five store primitives
       the post API needs.
Why:   Keeps SQLAlchemy out of PostService and lets tests substitute an
       in-memory store through FastAPI's dependency overrides.
How:   One method per primitive, one statement (plus commit) per call.
       No batching, caching or retries; errors propagate unchanged.
Who:   Built per request by get_post_store(); used by PostService.

Primitive mapping:
    create         → INSERT
    find_many      → SELECT ... WHERE <predicate>
    find_by_id     → SELECT by primary key
    update_by_id   → UPDATE ... RETURNING (full replace of title/content/category/tags)
    delete_by_id   → DELETE ... RETURNING id
"""

import logging
import uuid
from typing import Any, List, Optional, Sequence

from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.database import get_db_session
from app.models.post import Post, utcnow

logger = logging.getLogger(__name__)


def parse_post_id(post_id: Any) -> uuid.UUID:
    """
    Convert a path identifier into the store's key type.

    Raises:
        ValueError: the identifier is not a UUID. PostService reports this
                    as a store failure, the same way any other rejected
                    store call is reported.
    """
    if isinstance(post_id, uuid.UUID):
        return post_id
    try:
        return uuid.UUID(str(post_id))
    except ValueError:
        raise ValueError(
            f'Cast to UUID failed for value "{post_id}" at path "id"'
        ) from None


class PostStore:
    """Gateway over the `posts` table for a single request's session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(
        self,
        title: str,
        content: str,
        category: str,
        tags: Sequence[str],
    ) -> Post:
        post = Post(title=title, content=content, category=category, tags=list(tags))
        self.session.add(post)
        await self.session.commit()
        await self.session.refresh(post)
        logger.debug("Inserted post %s", post.id)
        return post

    async def find_many(self, predicate: Optional[ColumnElement[bool]] = None) -> List[Post]:
        query = select(Post)
        if predicate is not None:
            query = query.where(predicate)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def find_by_id(self, post_id: Any) -> Optional[Post]:
        return await self.session.get(Post, parse_post_id(post_id))

    async def update_by_id(
        self,
        post_id: Any,
        title: str,
        content: str,
        category: str,
        tags: Sequence[str],
    ) -> Optional[Post]:
        """Replace all four mutable fields; returns None when the id is unknown."""
        statement = (
            update(Post)
            .where(Post.id == parse_post_id(post_id))
            .values(
                title=title,
                content=content,
                category=category,
                tags=list(tags),
                updated_at=utcnow(),
            )
            .returning(Post)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(statement)
        post = result.scalar_one_or_none()
        if post is None:
            return None
        await self.session.commit()
        logger.debug("Replaced post %s", post.id)
        return post

    async def delete_by_id(self, post_id: Any) -> Optional[uuid.UUID]:
        """Delete in one statement; returns the removed id, or None when no row matched."""
        statement = delete(Post).where(Post.id == parse_post_id(post_id)).returning(Post.id)
        result = await self.session.execute(statement)
        deleted_id = result.scalar_one_or_none()
        if deleted_id is None:
            return None
        await self.session.commit()
        logger.debug("Deleted post %s", deleted_id)
        return deleted_id


async def get_post_store(db: AsyncSession = Depends(get_db_session)) -> PostStore:
    """FastAPI dependency returning a PostStore bound to the request session."""
    return PostStore(db)
