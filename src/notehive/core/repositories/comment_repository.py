"""Comment repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.comment import Comment


class CommentRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_comment(self, comment_data: dict) -> Comment:
        comment = Comment(**comment_data)
        self.session.add(comment)
        await self.session.commit()
        await self.session.refresh(comment)
        return comment

    async def get_by_id(self, comment_id: UUID) -> Optional[Comment]:
        stmt = select(Comment).where(Comment.id == comment_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_comment(self, comment: Comment) -> None:
        await self.session.delete(comment)
        await self.session.commit()

    async def list_for_note(
        self, note_id: UUID, offset: int, limit: Optional[int] = None
    ) -> tuple[List[Comment], int]:
        """Comments on a note, newest first. ``limit=None`` returns them all."""
        total = await self.count_for_note(note_id)

        stmt = (
            select(Comment)
            .where(Comment.note_id == note_id)
            .order_by(desc(Comment.created_at), desc(Comment.id))
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars()), total

    async def count_for_note(self, note_id: UUID) -> int:
        stmt = select(func.count(Comment.id)).where(Comment.note_id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
