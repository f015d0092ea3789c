"""
Pydantic schemas for validating and documenting API requests and responses.

Every schema inherits ``CamelModel``: attributes are snake_case in Python and
camelCase in JSON.
"""

from .auth import AuthResponse, AuthUserResponse, LoginRequest, RegisterRequest, UserResponse
from .comments import AuthorSummary, CommentCreate, CommentResponse
from .common import (
    CamelModel,
    ErrorResponse,
    PageParams,
    PaginatedResponse,
    SuccessResponse,
    parse_pagination,
)
from .notes import (
    BookmarkResponse,
    FeedPage,
    LikeResponse,
    NoteCreate,
    NoteDetail,
    NoteListItem,
    NoteResponse,
    NoteUpdate,
)
from .notifications import NotificationListResponse, NotificationResponse
from .users import FollowResponse, PasswordChangeRequest, ProfileUpdate, PublicProfile

__all__ = [
    # Common
    "CamelModel",
    "ErrorResponse",
    "SuccessResponse",
    "PageParams",
    "PaginatedResponse",
    "parse_pagination",
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthUserResponse",
    "AuthResponse",
    # Notes
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListItem",
    "NoteDetail",
    "FeedPage",
    "LikeResponse",
    "BookmarkResponse",
    # Comments
    "AuthorSummary",
    "CommentCreate",
    "CommentResponse",
    # Notifications
    "NotificationResponse",
    "NotificationListResponse",
    # Users
    "ProfileUpdate",
    "PasswordChangeRequest",
    "PublicProfile",
    "FollowResponse",
]
