"""Notification inbox: listing, read state and deletion."""

from typing import List, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories.notification_repository import NotificationRepository
from ..schemas.common import PageParams
from ..schemas.notifications import NotificationResponse
from .access import ensure_owner, not_found
from .interfaces import INotificationService
from .mappers import notification_to_response


class NotificationService(INotificationService):
    """Only the recipient may read, mark or delete a notification."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.notification_repo = NotificationRepository(session)

    async def list_notifications(
        self, user_id: UUID, params: PageParams
    ) -> Tuple[List[NotificationResponse], int, int]:
        notifications, total = await self.notification_repo.list_for_user(
            user_id, params.offset, params.limit
        )
        unread = await self.notification_repo.count_unread(user_id)
        return [notification_to_response(n) for n in notifications], total, unread

    async def mark_as_read(self, notification_id: UUID, user_id: UUID) -> NotificationResponse:
        notification = await self.notification_repo.get_by_id(notification_id)
        if not notification:
            raise not_found("Notification")
        ensure_owner(notification.user_id, user_id, "update this notification")

        notification = await self.notification_repo.mark_read(notification)
        return notification_to_response(notification)

    async def mark_all_as_read(self, user_id: UUID) -> int:
        return await self.notification_repo.mark_all_read(user_id)

    async def delete_notification(self, notification_id: UUID, user_id: UUID) -> None:
        notification = await self.notification_repo.get_by_id(notification_id)
        if not notification:
            raise not_found("Notification")
        ensure_owner(notification.user_id, user_id, "delete this notification")
        await self.notification_repo.delete_notification(notification)
