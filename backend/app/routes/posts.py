"""
Inkpost Backend — Posts Route Handlers
========================================

What:  CRUD endpoints for blog posts under /posts.
Why:   The HTTP contract of the service; everything else supports it.
How:   Parses path/query/body, delegates to PostService, sets status codes.
       Errors are raised as application exceptions and formatted by the
       global handlers in main.py.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.schemas.post import ErrorResponse, PostPayload, PostResponse
from app.services.post_service import post_service
from app.services.post_store import PostStore, get_post_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["Posts"])

_NOT_FOUND = {404: {"description": "Post not found", "model": ErrorResponse}}
_VALIDATION = {400: {"description": "Validation error", "model": ErrorResponse}}
_SERVER_ERROR = {500: {"description": "Store error", "model": ErrorResponse}}


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_VALIDATION, **_SERVER_ERROR},
    summary="Create a new blog post",
)
async def create_post(
    payload: PostPayload = Body(...),
    store: PostStore = Depends(get_post_store),
) -> PostResponse:
    return await post_service.create_post(store, payload)


@router.get(
    "",
    response_model=List[PostResponse],
    responses=_SERVER_ERROR,
    summary="Get all blog posts",
    description=(
        "Returns every post. With `term`, returns only posts whose title, content "
        "or category contains the term (case-insensitive)."
    ),
)
async def list_posts(
    term: Optional[str] = Query(
        default=None,
        description="Search term to filter posts (by title, content, or category)",
    ),
    store: PostStore = Depends(get_post_store),
) -> List[PostResponse]:
    return await post_service.list_posts(store, term=term)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a blog post by ID",
)
async def get_post(
    post_id: str,
    store: PostStore = Depends(get_post_store),
) -> PostResponse:
    # post_id stays a str: malformed ids are rejected by the store (500), not by FastAPI (422)
    return await post_service.get_post(store, post_id)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    responses={**_VALIDATION, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a blog post by ID",
    description="Replaces title, content, category and tags. Omitted tags become an empty list.",
)
async def update_post(
    post_id: str,
    payload: PostPayload = Body(...),
    store: PostStore = Depends(get_post_store),
) -> PostResponse:
    return await post_service.update_post(store, post_id, payload)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a blog post by ID",
)
async def delete_post(
    post_id: str,
    store: PostStore = Depends(get_post_store),
) -> Response:
    await post_service.delete_post(store, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
