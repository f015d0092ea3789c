"""
Service layer interfaces and implementations.
"""

from .interfaces import (
    IAuthService,
    ICommentService,
    IFeedService,
    IHealthService,
    IInteractionService,
    INoteService,
    INotificationService,
    IUserService,
)

from .access import ensure_owner
from .auth_service import AuthService
from .comment_service import CommentService
from .feed_service import FeedService
from .health_service import HealthService
from .interaction_service import InteractionService
from .note_service import NoteService
from .notification_service import NotificationService
from .notifier import Notifier, get_notifier
from .user_service import UserService

__all__ = [
    # Interfaces
    "IAuthService",
    "IFeedService",
    "INoteService",
    "IInteractionService",
    "ICommentService",
    "INotificationService",
    "IUserService",
    "IHealthService",
    # Implementations
    "AuthService",
    "FeedService",
    "NoteService",
    "InteractionService",
    "CommentService",
    "NotificationService",
    "UserService",
    "HealthService",
    "Notifier",
    "get_notifier",
    "ensure_owner",
]
