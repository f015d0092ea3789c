# Comments left on notes
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .user import User


class Comment(BaseModel):
    """Comment on a note.

    ``note_id`` deliberately carries no foreign key: deleting a note leaves its
    comments behind.
    """

    __tablename__ = "comments"

    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    note_id: Mapped[uuid.UUID] = mapped_column(GUID(), nullable=False)

    author: Mapped["User"] = relationship("User", lazy="selectin")

    __table_args__ = (
        Index("idx_comments_note_created", "note_id", "created_at"),
        Index("idx_comments_author", "author_id"),
    )

    def __repr__(self) -> str:
        return f"<Comment(note_id={self.note_id}, author_id={self.author_id})>"
