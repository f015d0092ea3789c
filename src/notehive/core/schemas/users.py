"""
User profile and social graph schemas.
"""

import uuid
from typing import Optional

from pydantic import Field

from .auth import UserResponse
from .common import CamelModel


class ProfileUpdate(CamelModel):
    """Profile fields; ``None`` means unchanged."""

    name: Optional[str] = Field(default=None, max_length=100)
    bio: Optional[str] = Field(default=None, max_length=1000)


class ProfileResponse(CamelModel):
    success: bool = True
    data: UserResponse


class PasswordChangeRequest(CamelModel):
    """Password change request schema."""

    current_password: Optional[str] = Field(default=None, description="Current password")
    new_password: Optional[str] = Field(
        default=None, min_length=6, max_length=128, description="New password"
    )


class PublicProfile(CamelModel):
    """Profile as any visitor sees it."""

    id: uuid.UUID
    name: str
    avatar: Optional[str] = None
    bio: Optional[str] = None
    followers_count: int = 0
    following_count: int = 0
    notes_count: int = 0
    is_following: bool = False


class PublicProfileData(CamelModel):
    user: PublicProfile


class PublicProfileResponse(CamelModel):
    success: bool = True
    data: PublicProfileData


class FollowResponse(CamelModel):
    success: bool = True
    is_following: bool
    message: str
