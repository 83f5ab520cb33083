"""
Inkpost Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the post API contract.
Why:   Explicit request structure, automatic serialization, and OpenAPI docs.
How:   FastAPI parses bodies into PostPayload, serializes PostResponse by
       alias (createdAt/updatedAt), and builds the /api-docs page from both.

Design Decision:
    PostPayload declares every field optional. Presence and non-emptiness of
    title/content/category are checked by PostService so that a missing field
    yields the fixed 400 message rather than FastAPI's 422 field report.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class PostPayload(BaseModel):
    """Body of POST /posts and PUT /posts/{id}."""

    title: Optional[str] = Field(
        default=None, description="Blog post title", examples=["My First Blog Post"]
    )
    content: Optional[str] = Field(
        default=None,
        description="Blog post content",
        examples=["This is the content of my first blog post."],
    )
    category: Optional[str] = Field(
        default=None, description="Blog post category", examples=["Technology"]
    )
    tags: Optional[List[str]] = Field(
        default=None, description="Ordered tag labels", examples=[["Tech", "Programming"]]
    )

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or empty."""
        return [
            name
            for name in ("title", "content", "category")
            if not getattr(self, name)
        ]


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class PostResponse(BaseModel):
    """
    What:  Full representation of a stored post.
    Who:   Returned by every post endpoint except DELETE.

    Timestamps serialize as createdAt/updatedAt and validate from either
    spelling, since FastAPI re-validates the by-alias dump of a response model.
    """

    id: uuid.UUID = Field(description="Auto-generated ID of the blog post")
    title: str = Field(description="Blog post title")
    content: str = Field(description="Blog post content")
    category: str = Field(description="Blog post category")
    tags: List[str] = Field(default_factory=list, description="Ordered tag labels")
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
        description="Date when the post was created",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
        description="Date when the post was last updated",
    )

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Example:
        {"error": "Post not found"}
    """

    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
