"""
Notification schemas.
"""

import uuid
from datetime import datetime
from typing import List

from .common import CamelModel


class NotificationResponse(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    message: str
    read: bool
    created_at: datetime


class NotificationList(CamelModel):
    notifications: List[NotificationResponse]
    unread_count: int = 0


class NotificationListResponse(CamelModel):
    success: bool = True
    count: int
    total: int
    total_pages: int
    current_page: int
    data: NotificationList


class NotificationEnvelope(CamelModel):
    success: bool = True
    data: NotificationResponse
