# Follower -> followed user edges
import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Follow(BaseModel):
    """One row per follow edge.

    ``follower_id`` follows ``followed_id``. A user's ``following`` set is every
    row where they are the follower, their ``followers`` set every row where
    they are followed, so both sides change together with one insert/delete.
    """

    __tablename__ = "follows"

    follower_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    followed_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("follower_id", "followed_id", name="uq_follows_pair"),
        CheckConstraint("follower_id <> followed_id", name="ck_follows_not_self"),
        Index("idx_follows_follower", "follower_id"),
        Index("idx_follows_followed", "followed_id"),
    )

    def __repr__(self) -> str:
        return f"<Follow(follower={self.follower_id}, followed={self.followed_id})>"
