"""
Comment schemas.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


class AuthorSummary(CamelModel):
    """Display fields of a note or comment author."""

    id: uuid.UUID
    name: str
    avatar: Optional[str] = None


class CommentCreate(CamelModel):
    """Blank content is rejected by the service with a 400."""

    content: Optional[str] = Field(default=None, max_length=5000)


class CommentResponse(CamelModel):
    id: uuid.UUID
    content: str
    note_id: uuid.UUID
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime


class CommentEnvelope(CamelModel):
    success: bool = True
    data: CommentResponse
