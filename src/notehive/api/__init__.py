"""API routers for NoteHive."""

from .auth import router as auth_router
from .comments import router as comments_router
from .health import router as health_router
from .notes import router as notes_router
from .notifications import router as notifications_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "notes_router",
    "comments_router",
    "users_router",
    "notifications_router",
    "health_router",
]
