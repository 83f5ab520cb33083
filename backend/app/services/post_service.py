"""
Inkpost Backend — Post Service (Business Logic)
=================================================

What:  Validates post payloads, builds the search predicate, and converts
       store outcomes into responses or typed exceptions.
Why:   Keeps HTTP concerns in the routes and SQL in PostStore; everything
       the API decides on its own lives here.
How:   Each method makes exactly one PostStore call. A None result becomes
       NotFoundError; any exception from the store becomes StoreError with
       the original message.
Who:   Called by the /posts route handlers.

Design Decision:
    PostService is stateless — it receives the store for each call, so tests
    can pass any object with the PostStore method set.
"""

import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

from app.exceptions import NotFoundError, StoreError, ValidationError
from app.models.post import Post
from app.schemas.post import PostPayload, PostResponse
from app.services.post_store import PostStore

logger = logging.getLogger(__name__)

# Fields the search term is matched against, OR-ed together
SEARCH_FIELDS = ("title", "content", "category")

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_search_predicate(term: Optional[str]) -> Optional[ColumnElement[bool]]:
    """
    Build the list filter for a search term.

    Returns None for an absent or empty term (list everything). Otherwise a
    case-insensitive substring match on title OR content OR category.
    """
    if not term:
        return None
    pattern = f"%{escape_like(term)}%"
    return or_(
        *(getattr(Post, field).ilike(pattern, escape=LIKE_ESCAPE) for field in SEARCH_FIELDS)
    )


def validate_payload(payload: PostPayload) -> None:
    """Raise ValidationError when title, content or category is missing or empty."""
    missing = payload.missing_fields()
    if missing:
        raise ValidationError(field=missing[0], context={"missing": missing})


class PostService:
    """
    Business logic layer for post operations.

    Responsibilities:
        - create_post(): validate, insert
        - list_posts():  optional term → predicate, fetch
        - get_post():    fetch by id, not-found handling
        - update_post(): validate, full replace, not-found handling
        - delete_post(): delete by id, not-found handling
    """

    @staticmethod
    def _store_failure(operation: str, exc: Exception, post_id: Optional[str] = None) -> StoreError:
        logger.error(
            "Store error during %s%s: %s",
            operation,
            f" of post {post_id}" if post_id else "",
            str(exc),
        )
        context = {"operation": operation, "error_type": type(exc).__name__}
        if post_id:
            context["post_id"] = post_id
        return StoreError(message=str(exc), context=context)

    async def create_post(self, store: PostStore, payload: PostPayload) -> PostResponse:
        """
        Persist a new post.

        Raises:
            ValidationError: a required field is missing or empty (→ 400)
            StoreError: the insert failed (→ 500)
        """
        validate_payload(payload)
        try:
            post = await store.create(
                title=payload.title,
                content=payload.content,
                category=payload.category,
                tags=payload.tags or [],
            )
        except Exception as e:
            raise self._store_failure("create", e)

        logger.info("Post %s created", post.id)
        return PostResponse.model_validate(post)

    async def list_posts(self, store: PostStore, term: Optional[str] = None) -> List[PostResponse]:
        """Every post, or only those matching `term` on title, content or category."""
        predicate = build_search_predicate(term)
        try:
            posts = await store.find_many(predicate)
        except Exception as e:
            raise self._store_failure("list", e)

        return [PostResponse.model_validate(post) for post in posts]

    async def get_post(self, store: PostStore, post_id: str) -> PostResponse:
        try:
            post = await store.find_by_id(post_id)
        except Exception as e:
            raise self._store_failure("get", e, post_id)

        if post is None:
            raise NotFoundError(resource="Post", resource_id=post_id)
        return PostResponse.model_validate(post)

    async def update_post(
        self, store: PostStore, post_id: str, payload: PostPayload
    ) -> PostResponse:
        """
        Replace title, content, category and tags of an existing post.

        An omitted `tags` is written as an empty list: the update is a full
        replacement, never a merge with the stored values.
        The payload is validated before the store is called, so an incomplete
        body is a 400 even when the id does not exist.

        Raises:
            ValidationError: a required field is missing or empty (→ 400)
            NotFoundError: no post with this id (→ 404)
            StoreError: the update failed (→ 500)
        """
        validate_payload(payload)
        try:
            post = await store.update_by_id(
                post_id,
                title=payload.title,
                content=payload.content,
                category=payload.category,
                tags=payload.tags or [],
            )
        except Exception as e:
            raise self._store_failure("update", e, post_id)

        if post is None:
            raise NotFoundError(resource="Post", resource_id=post_id)
        logger.info("Post %s updated", post_id)
        return PostResponse.model_validate(post)

    async def delete_post(self, store: PostStore, post_id: str) -> None:
        try:
            deleted_id = await store.delete_by_id(post_id)
        except Exception as e:
            raise self._store_failure("delete", e, post_id)

        if deleted_id is None:
            raise NotFoundError(resource="Post", resource_id=post_id)
        logger.info("Post %s deleted", post_id)


# ── Singleton Instance ────────────────────────────────────────────────────
post_service = PostService()
