"""Unit tests for best-effort notification dispatch."""

import uuid

from sqlalchemy import select

from notehive.core.models import Notification
from notehive.core.services.notifier import Notifier


class FlakyFactory:
    """Session factory that fails for chosen recipients."""

    def __init__(self, real_factory, failing_ids):
        self.real_factory = real_factory
        self.failing_ids = set(failing_ids)
        self.current = None

    def __call__(self):
        if self.current in self.failing_ids:
            raise RuntimeError("database unavailable")
        return self.real_factory()


async def test_notify_persists_message(session_factory, make_user):
    user = await make_user("Grace")
    notifier = Notifier(session_factory)

    assert await notifier.notify(user.id, "hello") is True

    async with session_factory() as session:
        rows = (await session.execute(select(Notification))).scalars().all()
    assert [(n.user_id, n.message, n.read) for n in rows] == [(user.id, "hello", False)]


async def test_notify_swallows_failures():
    def broken_factory():
        raise RuntimeError("boom")

    notifier = Notifier(broken_factory)
    assert await notifier.notify(uuid.uuid4(), "hello") is False


async def test_notify_unknown_recipient_reports_false(session_factory):
    # foreign key violation on a missing user
    notifier = Notifier(session_factory)
    assert await notifier.notify(uuid.uuid4(), "hello") is False


async def test_notify_many_continues_after_one_failure(session_factory, make_user):
    f1 = await make_user("F1")
    f2 = await make_user("F2")
    flaky = FlakyFactory(session_factory, failing_ids={f1.id})
    notifier = Notifier(flaky)

    original_notify = notifier.notify

    async def tracking_notify(user_id, message):
        flaky.current = user_id
        return await original_notify(user_id, message)

    notifier.notify = tracking_notify

    delivered = await notifier.notify_many([f1.id, f2.id], "new note")

    assert delivered == 1
    async with session_factory() as session:
        rows = (await session.execute(select(Notification))).scalars().all()
    assert [n.user_id for n in rows] == [f2.id]
