# Tag models for labelling notes
import uuid
from typing import Iterable, List

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, UniqueConstraint, event
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Tag(BaseModel):
    """Tag name shared by every note that carries it."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(50), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", name="uq_tags_name"),
        CheckConstraint("name = lower(name)", name="ck_tags_name_lowercase"),
        CheckConstraint("length(name) <= 50", name="ck_tags_name_len"),
        Index("idx_tags_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Tag(name='{self.name}')>"

    @classmethod
    def normalize_name(cls, name: str) -> str:
        """Clean up tag name."""
        clean = name.strip().lower()
        if not clean:
            raise ValueError("Tag name cannot be empty")
        return clean

    @classmethod
    def normalize_names(cls, names: Iterable[str]) -> List[str]:
        """Normalize, drop empties and duplicates, keep first-seen order."""
        seen: List[str] = []
        for raw in names:
            clean = raw.strip().lower()
            if clean and clean not in seen:
                seen.append(clean)
        return seen


@event.listens_for(Tag, "before_insert", propagate=True)
def _normalize_tag_name_before_insert(mapper, connection, target: Tag):
    target.name = Tag.normalize_name(target.name)


@event.listens_for(Tag, "before_update", propagate=True)
def _normalize_tag_name_before_update(mapper, connection, target: Tag):
    target.name = Tag.normalize_name(target.name)


class NoteTag(BaseModel):
    """Association row between a note and a tag."""

    __tablename__ = "note_tags"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    tag_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tags.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("note_id", "tag_id", name="uq_note_tags_note_tag"),
        Index("idx_note_tags_note_id", "note_id"),
        Index("idx_note_tags_tag_id", "tag_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteTag(note_id={self.note_id}, tag_id={self.tag_id})>"
