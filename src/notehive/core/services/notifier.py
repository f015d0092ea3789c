"""
Best-effort notification dispatch.

Each notification is written in its own session so a failed insert can never
roll back, or expire objects of, the request that triggered it.
"""

from typing import Iterable
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from ...database import get_session_factory
from ..logging import get_logger
from ..repositories.notification_repository import NotificationRepository

logger = get_logger("notifier")


class Notifier:
    def __init__(self, session_factory: async_sessionmaker):
        self.session_factory = session_factory

    async def notify(self, user_id: UUID, message: str) -> bool:
        """Write one notification; failures are logged and reported as False."""
        try:
            async with self.session_factory() as session:
                await NotificationRepository(session).create_notification(user_id, message)
        except Exception as e:
            logger.error(
                f"Failed to create notification: {e}",
                extra={"recipient_id": str(user_id)},
                exc_info=True,
            )
            return False
        return True

    async def notify_many(self, user_ids: Iterable[UUID], message: str) -> int:
        """Notify every recipient independently; returns how many succeeded."""
        delivered = 0
        for user_id in user_ids:
            if await self.notify(user_id, message):
                delivered += 1
        return delivered


def get_notifier(session_factory: async_sessionmaker = Depends(get_session_factory)) -> Notifier:
    return Notifier(session_factory)
