"""
Authentication and account schemas.

These schemas define the API contracts for registration, login and the
current user's profile.
"""

import uuid
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from .common import CamelModel


class RegisterRequest(CamelModel):
    """User registration request schema."""

    name: str = Field(min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(description="Login email, unique")
    password: str = Field(min_length=6, max_length=128, description="User password")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Ada", "email": "ada@example.com", "password": "secret123"}
        }
    )


class LoginRequest(CamelModel):
    """User login request schema."""

    email: EmailStr = Field(description="Login email")
    password: str = Field(min_length=1, max_length=128, description="User password")


class UserResponse(CamelModel):
    """Account as seen by its owner."""

    id: uuid.UUID
    name: str
    email: str
    avatar: Optional[str] = None
    bio: Optional[str] = None


class AuthUserResponse(UserResponse):
    """Account plus a freshly issued access token."""

    token: str


class AuthResponse(CamelModel):
    success: bool = True
    data: AuthUserResponse


class CurrentUserResponse(CamelModel):
    success: bool = True
    data: UserResponse
