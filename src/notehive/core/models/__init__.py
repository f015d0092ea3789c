"""
Database models for the NoteHive application.

SQLAlchemy ORM models for the social notes platform, used through async
sessions and the repository layer.

Models included:
    - User: account with email/password authentication and profile
    - Follow: follower -> followed edge
    - Note / NoteLike: uploaded documents and their likes
    - Tag / NoteTag: tag names and note associations
    - Bookmark: notes saved by a user
    - Comment: comments on notes
    - Notification: per-user messages
"""

from .base import BaseModel
from .bookmark import Bookmark
from .comment import Comment
from .follow import Follow
from .note import Note, NoteLike
from .notification import Notification
from .tag import NoteTag, Tag
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Follow",
    "Note",
    "NoteLike",
    "Tag",
    "NoteTag",
    "Bookmark",
    "Comment",
    "Notification",
]
