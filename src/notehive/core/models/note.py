# Note model: uploaded document plus metadata
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, Integer, String, Text, UniqueConstraint, event
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.orm import attributes as orm_attributes

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .tag import Tag
    from .user import User


class Note(BaseModel):
    """Uploaded document owned by one author."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # file reference, path is the public /uploads/... URL path
    file_path: Mapped[str] = mapped_column(String(500), nullable=False)
    file_type: Mapped[str] = mapped_column(String(20), nullable=False)
    file_size: Mapped[int] = mapped_column(Integer, nullable=False)

    downloads: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # immutable after creation
    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    author: Mapped["User"] = relationship("User", lazy="selectin")

    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary="note_tags",
        lazy="selectin",
        order_by="Tag.name",
    )

    __table_args__ = (
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
        CheckConstraint("downloads >= 0", name="ck_notes_downloads_positive"),
        Index("idx_notes_author_id", "author_id"),
        Index("idx_notes_author_created", "author_id", "created_at"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', author_id={self.author_id})>"

    @property
    def tag_names(self) -> List[str]:
        return [tag.name for tag in self.tags]

    @property
    def short_title(self) -> str:
        """Title cut to 30 characters for notification messages."""
        return self.title if len(self.title) <= 30 else f"{self.title[:30]}..."

    def is_owned_by(self, user_id: uuid.UUID) -> bool:
        return self.author_id == user_id


# new instances start with an empty, already-loaded tag collection
@event.listens_for(Note, "init", propagate=True)
def _init_note_collections(target, args, kwargs):
    if "tags" not in kwargs:
        orm_attributes.set_committed_value(target, "tags", [])


class NoteLike(BaseModel):
    """A user's like on a note; the unique pair keeps likes a set."""

    __tablename__ = "note_likes"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("note_id", "user_id", name="uq_note_likes_pair"),
        Index("idx_note_likes_note", "note_id"),
        Index("idx_note_likes_user", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteLike(note_id={self.note_id}, user_id={self.user_id})>"
