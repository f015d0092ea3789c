"""Unit tests for the notification inbox."""

import uuid

import pytest
from fastapi import HTTPException

from notehive.core.repositories.notification_repository import NotificationRepository
from notehive.core.schemas.common import PageParams
from notehive.core.services.notification_service import NotificationService


@pytest.fixture
def inbox(test_session):
    return NotificationService(test_session)


async def _notify(session_factory, user, *messages):
    created = []
    async with session_factory() as session:
        repo = NotificationRepository(session)
        for message in messages:
            created.append(await repo.create_notification(user.id, message))
    return created


async def test_list_reports_total_and_unread(inbox, session_factory, user, make_user):
    other = await make_user("Other")
    await _notify(session_factory, user, "a", "b", "c")
    await _notify(session_factory, other, "not yours")

    items, total, unread = await inbox.list_notifications(user.id, PageParams(page=1, limit=2))

    assert len(items) == 2
    assert total == 3
    assert unread == 3
    assert all(n.user_id == user.id for n in items)


async def test_mark_as_read_by_recipient(inbox, session_factory, user):
    [notification] = await _notify(session_factory, user, "hello")

    result = await inbox.mark_as_read(notification.id, user.id)

    assert result.read is True
    _, _, unread = await inbox.list_notifications(user.id, PageParams())
    assert unread == 0


async def test_mark_as_read_by_someone_else_is_forbidden(
    inbox, session_factory, user, make_user
):
    [notification] = await _notify(session_factory, user, "hello")
    other = await make_user("Other")

    with pytest.raises(HTTPException) as exc_info:
        await inbox.mark_as_read(notification.id, other.id)

    assert exc_info.value.status_code == 403


async def test_mark_all_as_read_only_touches_unread(inbox, session_factory, user):
    first, _, _ = await _notify(session_factory, user, "a", "b", "c")
    await inbox.mark_as_read(first.id, user.id)

    changed = await inbox.mark_all_as_read(user.id)

    assert changed == 2
    _, _, unread = await inbox.list_notifications(user.id, PageParams())
    assert unread == 0


async def test_delete_notification(inbox, session_factory, user, make_user):
    [notification] = await _notify(session_factory, user, "bye")
    other = await make_user("Other")

    with pytest.raises(HTTPException) as exc_info:
        await inbox.delete_notification(notification.id, other.id)
    assert exc_info.value.status_code == 403

    await inbox.delete_notification(notification.id, user.id)
    _, total, _ = await inbox.list_notifications(user.id, PageParams())
    assert total == 0


async def test_unknown_notification_is_404(inbox, user):
    with pytest.raises(HTTPException) as exc_info:
        await inbox.mark_as_read(uuid.uuid4(), user.id)
    assert exc_info.value.detail == "Notification not found"
