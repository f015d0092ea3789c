"""
User account model.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """Registered account. Follows and bookmarks live in their own tables."""

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    avatar: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)  # /uploads/...
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("length(name) <= 100", name="ck_users_name_len"),
        CheckConstraint("email = lower(email)", name="ck_users_email_lowercase"),
        Index("idx_users_email", "email"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"

    @classmethod
    def normalize_email(cls, email: str) -> str:
        return email.strip().lower()
