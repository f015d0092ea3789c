"""Notification repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.notification import Notification


class NotificationRepository:
    """Repository for per-user notification records."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_notification(self, user_id: UUID, message: str) -> Notification:
        notification = Notification(user_id=user_id, message=message)
        self.session.add(notification)
        await self.session.commit()
        await self.session.refresh(notification)
        return notification

    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        stmt = select(Notification).where(Notification.id == notification_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(
        self, user_id: UUID, offset: int, limit: int
    ) -> tuple[List[Notification], int]:
        count_stmt = select(func.count(Notification.id)).where(Notification.user_id == user_id)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(desc(Notification.created_at), desc(Notification.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total

    async def count_unread(self, user_id: UUID) -> int:
        stmt = select(func.count(Notification.id)).where(
            and_(Notification.user_id == user_id, Notification.read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(self, notification: Notification) -> Notification:
        notification.mark_read()
        await self.session.commit()
        await self.session.refresh(notification)
        return notification

    async def mark_all_read(self, user_id: UUID) -> int:
        """Bulk update; returns the number of rows that changed."""
        stmt = (
            update(Notification)
            .where(and_(Notification.user_id == user_id, Notification.read.is_(False)))
            .values(read=True)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def delete_notification(self, notification: Notification) -> None:
        await self.session.delete(notification)
        await self.session.commit()
