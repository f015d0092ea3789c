"""Repository layer for data access."""

from .bookmark_repository import BookmarkRepository
from .comment_repository import CommentRepository
from .follow_repository import FollowRepository
from .note_repository import NoteRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "FollowRepository",
    "BookmarkRepository",
    "NoteRepository",
    "CommentRepository",
    "NotificationRepository",
]
