"""Notification inbox endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import PageParams, SuccessResponse
from ..core.schemas.notifications import (
    NotificationEnvelope,
    NotificationList,
    NotificationListResponse,
)
from ..core.services import NotificationService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id
from .deps import get_page_params

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    params: PageParams = Depends(get_page_params),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """The caller's notifications, newest first, with the unread count."""
    notification_service = NotificationService(session)
    notifications, total, unread = await notification_service.list_notifications(
        current_user_id, params
    )
    return NotificationListResponse(
        count=len(notifications),
        total=total,
        total_pages=params.total_pages(total),
        current_page=params.page,
        data=NotificationList(notifications=notifications, unread_count=unread),
    )


@router.put("/read-all", response_model=SuccessResponse)
async def mark_all_as_read(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    notification_service = NotificationService(session)
    await notification_service.mark_all_as_read(current_user_id)
    return SuccessResponse(message="All notifications marked as read")


@router.put("/{notification_id}/read", response_model=NotificationEnvelope)
async def mark_as_read(
    notification_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    notification_service = NotificationService(session)
    notification = await notification_service.mark_as_read(notification_id, current_user_id)
    return NotificationEnvelope(data=notification)


@router.delete("/{notification_id}", response_model=SuccessResponse)
async def delete_notification(
    notification_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    notification_service = NotificationService(session)
    await notification_service.delete_notification(notification_id, current_user_id)
    return SuccessResponse(message="Notification deleted")
