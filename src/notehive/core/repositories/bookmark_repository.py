"""Bookmark repository."""

from typing import List, Set
from uuid import UUID

from sqlalchemy import and_, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.bookmark import Bookmark
from ..models.note import Note


class BookmarkRepository:
    """A user's saved notes, kept in insertion order."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def is_bookmarked(self, user_id: UUID, note_id: UUID) -> bool:
        stmt = select(Bookmark.id).where(
            and_(Bookmark.user_id == user_id, Bookmark.note_id == note_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def add(self, user_id: UUID, note_id: UUID) -> None:
        self.session.add(Bookmark(user_id=user_id, note_id=note_id))
        await self.session.commit()

    async def remove(self, user_id: UUID, note_id: UUID) -> bool:
        stmt = delete(Bookmark).where(
            and_(Bookmark.user_id == user_id, Bookmark.note_id == note_id)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def get_note_ids(self, user_id: UUID) -> List[UUID]:
        """The user's bookmark list, oldest first."""
        stmt = (
            select(Bookmark.note_id)
            .where(Bookmark.user_id == user_id)
            .order_by(Bookmark.created_at, Bookmark.id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def bookmarked_among(self, user_id: UUID, note_ids: List[UUID]) -> Set[UUID]:
        if not note_ids:
            return set()
        stmt = select(Bookmark.note_id).where(
            and_(Bookmark.user_id == user_id, Bookmark.note_id.in_(note_ids))
        )
        result = await self.session.execute(stmt)
        return set(result.scalars())

    async def list_notes(
        self, user_id: UUID, offset: int, limit: int
    ) -> tuple[List[Note], int]:
        """Bookmarked notes, most recently bookmarked first."""
        count_stmt = select(func.count(Bookmark.id)).where(Bookmark.user_id == user_id)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(Note)
            .join(Bookmark, Bookmark.note_id == Note.id)
            .where(Bookmark.user_id == user_id)
            .order_by(desc(Bookmark.created_at), desc(Bookmark.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total
