"""
Service interfaces for NoteHive application.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from ..context import RequestContext
from ..schemas.auth import AuthUserResponse, LoginRequest, RegisterRequest, UserResponse
from ..schemas.comments import CommentResponse
from ..schemas.common import HealthCheckResponse, PageParams
from ..schemas.notes import FeedPage, NoteCreate, NoteDetail, NoteListItem, NoteResponse, NoteUpdate
from ..schemas.notifications import NotificationResponse
from ..schemas.users import PasswordChangeRequest, ProfileUpdate, PublicProfile
from ..storage import StoredFile


class IAuthService(ABC):
    """Account registration and login."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthUserResponse:
        """Create an account and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthUserResponse:
        """Check credentials and issue a token."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        pass

    @abstractmethod
    async def logout_user(self, access_token: str) -> bool:
        """Blacklist the presented token."""
        pass


class IFeedService(ABC):
    """Read side: feed, note detail and per-user listings."""

    @abstractmethod
    async def list_notes(
        self,
        params: PageParams,
        ctx: RequestContext,
        search: Optional[str] = None,
        tags: Optional[str] = None,
    ) -> FeedPage:
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, ctx: RequestContext) -> NoteDetail:
        pass

    @abstractmethod
    async def list_user_notes(
        self, user_id: UUID, params: PageParams
    ) -> Tuple[List[NoteListItem], int]:
        pass

    @abstractmethod
    async def list_bookmarks(
        self, user_id: UUID, params: PageParams
    ) -> Tuple[List[NoteListItem], int]:
        pass


class INoteService(ABC):
    """Note writes and downloads."""

    @abstractmethod
    async def create_note(
        self, author_id: UUID, request: NoteCreate, stored: StoredFile
    ) -> NoteResponse:
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        pass

    @abstractmethod
    async def download_note(self, note_id: UUID) -> Tuple[Path, str]:
        """Return the file on disk and the name to download it as."""
        pass


class IInteractionService(ABC):
    """Likes, bookmarks and follows."""

    @abstractmethod
    async def toggle_like(self, note_id: UUID, user_id: UUID) -> Tuple[bool, int]:
        pass

    @abstractmethod
    async def toggle_bookmark(self, note_id: UUID, user_id: UUID) -> Tuple[bool, List[UUID]]:
        pass

    @abstractmethod
    async def toggle_follow(self, target_id: UUID, caller_id: UUID) -> Tuple[bool, str]:
        pass


class ICommentService(ABC):
    @abstractmethod
    async def add_comment(
        self, note_id: UUID, author_id: UUID, content: Optional[str]
    ) -> CommentResponse:
        pass

    @abstractmethod
    async def list_comments(
        self, note_id: UUID, params: PageParams
    ) -> Tuple[List[CommentResponse], int]:
        pass

    @abstractmethod
    async def delete_comment(self, comment_id: UUID, user_id: UUID) -> None:
        pass


class INotificationService(ABC):
    @abstractmethod
    async def list_notifications(
        self, user_id: UUID, params: PageParams
    ) -> Tuple[List[NotificationResponse], int, int]:
        """Page of notifications, total and unread count."""
        pass

    @abstractmethod
    async def mark_as_read(self, notification_id: UUID, user_id: UUID) -> NotificationResponse:
        pass

    @abstractmethod
    async def mark_all_as_read(self, user_id: UUID) -> int:
        pass

    @abstractmethod
    async def delete_notification(self, notification_id: UUID, user_id: UUID) -> None:
        pass


class IUserService(ABC):
    """Profiles and passwords."""

    @abstractmethod
    async def update_profile(
        self, user_id: UUID, request: ProfileUpdate, avatar: Optional[StoredFile] = None
    ) -> UserResponse:
        pass

    @abstractmethod
    async def change_password(self, user_id: UUID, request: PasswordChangeRequest) -> None:
        pass

    @abstractmethod
    async def get_public_profile(self, user_id: UUID, ctx: RequestContext) -> PublicProfile:
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        pass
