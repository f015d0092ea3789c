# User bookmarks
import uuid

from sqlalchemy import ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Bookmark(BaseModel):
    """A note saved by a user.

    The user's bookmark list is these rows in insertion order. Notes keep no
    back-reference.
    """

    __tablename__ = "bookmarks"

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "note_id", name="uq_bookmarks_pair"),
        Index("idx_bookmarks_user_created", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Bookmark(user_id={self.user_id}, note_id={self.note_id})>"
