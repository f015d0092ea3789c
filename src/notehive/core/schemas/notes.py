"""
Note schemas.

These schemas define the API contracts for note uploads and edits, the
annotated feed, and the like/bookmark toggles.
"""

import uuid
from datetime import datetime
from typing import List, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from .comments import AuthorSummary, CommentResponse
from .common import CamelModel


def split_tags(value: Union[str, List[str], None]) -> Optional[List[str]]:
    """Accept ``"a, b"`` or ``["a", "b"]``; trim, lower-case, drop empties and repeats."""
    if value is None:
        return None
    items = value.split(",") if isinstance(value, str) else value
    tags: List[str] = []
    for item in items:
        clean = str(item).strip().lower()
        if clean and clean not in tags:
            tags.append(clean)
    return tags


def _validate_tag_lengths(tags: Optional[List[str]]) -> Optional[List[str]]:
    if tags is None:
        return None
    if len(tags) > 20:
        raise ValueError("A note can have at most 20 tags")
    for tag in tags:
        if len(tag) > 50:
            raise ValueError("Tags must be at most 50 characters")
    return tags


class NoteCreate(CamelModel):
    """Metadata sent alongside an uploaded file."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    description: str = Field(min_length=1, description="Note description")
    tags: List[str] = Field(default_factory=list, description="Note tags")
    is_public: bool = Field(default=True)

    @field_validator("title", "description")
    @classmethod
    def strip_required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, v):
        return split_tags(v) or []

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v):
        return _validate_tag_lengths(v)


class NoteUpdate(CamelModel):
    """Partial update: ``None`` or blank means unchanged."""

    title: Optional[str] = Field(default=None, max_length=200)
    description: Optional[str] = Field(default=None)
    tags: Optional[List[str]] = Field(default=None)
    is_public: Optional[bool] = Field(default=None)

    @field_validator("title", "description")
    @classmethod
    def blank_is_unchanged(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("tags", mode="before")
    @classmethod
    def parse_tags(cls, v):
        return split_tags(v)

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v):
        return _validate_tag_lengths(v)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Linear Algebra II", "tags": "math,algebra"},
        }
    )


class NoteResponse(CamelModel):
    """A note record with its author summary."""

    id: uuid.UUID
    title: str
    description: str
    file_path: str
    file_type: str
    file_size: int
    tags: List[str]
    downloads: int
    is_public: bool
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime


class NoteListItem(NoteResponse):
    """A note annotated for one viewer."""

    is_liked: bool = False
    is_bookmarked: bool = False
    likes_count: int = 0


class NoteDetail(NoteListItem):
    comments_count: int = 0
    comments: List[CommentResponse] = Field(default_factory=list)


class FeedPage(CamelModel):
    """Body of ``GET /notes``."""

    data: List[NoteListItem]
    current_page: int
    total_pages: int
    total: int


class NoteEnvelope(CamelModel):
    success: bool = True
    data: NoteResponse


class NoteDetailEnvelope(CamelModel):
    success: bool = True
    data: NoteDetail


class LikeResponse(CamelModel):
    success: bool = True
    is_liked: bool
    likes_count: int


class BookmarkState(CamelModel):
    is_bookmarked: bool
    bookmark_ids: List[uuid.UUID]


class BookmarkResponse(CamelModel):
    success: bool = True
    data: BookmarkState
