"""Note repository for database operations."""

from typing import Dict, Iterable, List, Optional, Set
from uuid import UUID

from sqlalchemy import and_, delete, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.bookmark import Bookmark
from ..models.note import Note, NoteLike
from ..models.tag import NoteTag, Tag

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


class NoteRepository:
    """Repository for notes, their tags and likes."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_or_create_tags(self, tag_names: Iterable[str]) -> List[Tag]:
        names = Tag.normalize_names(tag_names)
        if not names:
            return []

        result = await self.session.execute(select(Tag).where(Tag.name.in_(names)))
        existing = {tag.name: tag for tag in result.scalars()}

        tags = []
        for name in names:
            tag = existing.get(name)
            if tag is None:
                tag = Tag(name=name)
                self.session.add(tag)
            tags.append(tag)
        return tags

    async def create_note(self, note_data: dict, tag_names: Iterable[str] = ()) -> Note:
        """Create note and its tag links in one commit."""
        note = Note(**note_data)
        note.tags = await self.get_or_create_tags(tag_names)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(
        self, note: Note, update_data: dict, tag_names: Optional[Iterable[str]] = None
    ) -> Note:
        """Apply changed fields; ``tag_names`` replaces the tag set when given."""
        for key, value in update_data.items():
            setattr(note, key, value)
        if tag_names is not None:
            note.tags = await self.get_or_create_tags(tag_names)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete note with its likes and bookmarks. Comments stay.

        Tag links go with the ``tags`` collection, so they are not deleted
        by hand here.
        """
        note_id = note.id
        await self.session.execute(delete(NoteLike).where(NoteLike.note_id == note_id))
        await self.session.execute(delete(Bookmark).where(Bookmark.note_id == note_id))
        await self.session.delete(note)
        await self.session.commit()

    async def increment_downloads(self, note_id: UUID) -> int:
        """Atomic counter bump; returns the new value."""
        stmt = (
            update(Note)
            .where(Note.id == note_id)
            .values(downloads=Note.downloads + 1)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.commit()

        result = await self.session.execute(select(Note.downloads).where(Note.id == note_id))
        return result.scalar() or 0

    def _feed_conditions(self, search: Optional[str], tags: Optional[List[str]]) -> list:
        conditions = []
        if search:
            pattern = f"%{escape_like(search)}%"
            conditions.append(
                or_(
                    Note.title.ilike(pattern, escape=LIKE_ESCAPE),
                    Note.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        if tags:
            tagged = (
                select(NoteTag.note_id)
                .join(Tag, Tag.id == NoteTag.tag_id)
                .where(Tag.name.in_(tags))
            )
            conditions.append(Note.id.in_(tagged))
        return conditions

    async def list_feed(
        self,
        offset: int,
        limit: int,
        search: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> tuple[List[Note], int]:
        """Filtered feed page, newest first, plus the filtered total."""
        conditions = self._feed_conditions(search, tags)

        count_stmt = select(func.count(Note.id)).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(Note)
            .where(*conditions)
            .order_by(desc(Note.created_at), desc(Note.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total

    async def list_by_author(
        self, author_id: UUID, offset: int, limit: int
    ) -> tuple[List[Note], int]:
        count_stmt = select(func.count(Note.id)).where(Note.author_id == author_id)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(Note)
            .where(Note.author_id == author_id)
            .order_by(desc(Note.created_at), desc(Note.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total

    async def count_by_author(self, author_id: UUID) -> int:
        stmt = select(func.count(Note.id)).where(Note.author_id == author_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    # Likes

    async def has_liked(self, note_id: UUID, user_id: UUID) -> bool:
        stmt = select(NoteLike.id).where(
            and_(NoteLike.note_id == note_id, NoteLike.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add_like(self, note_id: UUID, user_id: UUID) -> None:
        self.session.add(NoteLike(note_id=note_id, user_id=user_id))
        await self.session.commit()

    async def remove_like(self, note_id: UUID, user_id: UUID) -> bool:
        stmt = delete(NoteLike).where(
            and_(NoteLike.note_id == note_id, NoteLike.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def count_likes(self, note_id: UUID) -> int:
        stmt = select(func.count(NoteLike.id)).where(NoteLike.note_id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def like_counts(self, note_ids: List[UUID]) -> Dict[UUID, int]:
        """Like count per note for a page of notes; missing ids mean zero."""
        if not note_ids:
            return {}
        stmt = (
            select(NoteLike.note_id, func.count(NoteLike.id))
            .where(NoteLike.note_id.in_(note_ids))
            .group_by(NoteLike.note_id)
        )
        result = await self.session.execute(stmt)
        return {note_id: count for note_id, count in result.all()}

    async def liked_note_ids(self, user_id: UUID, note_ids: List[UUID]) -> Set[UUID]:
        """Which of ``note_ids`` the user has liked."""
        if not note_ids:
            return set()
        stmt = select(NoteLike.note_id).where(
            and_(NoteLike.user_id == user_id, NoteLike.note_id.in_(note_ids))
        )
        result = await self.session.execute(stmt)
        return set(result.scalars())
