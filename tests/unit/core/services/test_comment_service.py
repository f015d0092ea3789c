"""Unit tests for comments."""

import uuid
from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException

from notehive.core.schemas.common import PageParams
from notehive.core.services.comment_service import CommentService


@pytest.fixture
def notifier():
    return AsyncMock()


@pytest.fixture
def comments(test_session, notifier):
    return CommentService(test_session, notifier)


async def test_add_comment_trims_and_notifies_author(
    comments, notifier, user, make_user, make_note
):
    note = await make_note(user, title="Thermodynamics and Statistical Physics")
    reader = await make_user("Reader")

    comment = await comments.add_comment(note.id, reader.id, "  Nice summary  ")

    assert comment.content == "Nice summary"
    assert comment.note_id == note.id
    assert comment.author.name == "Reader"
    notifier.notify.assert_awaited_once_with(
        user.id, 'Reader commented on your note "Thermodynamics and Statistical..."'
    )


async def test_author_commenting_on_own_note_is_not_notified(
    comments, notifier, user, make_note
):
    note = await make_note(user)

    await comments.add_comment(note.id, user.id, "Errata: page 3")

    notifier.notify.assert_not_awaited()


@pytest.mark.parametrize("content", [None, "", "   "])
async def test_blank_comment_is_rejected(comments, user, make_note, content):
    note = await make_note(user)

    with pytest.raises(HTTPException) as exc_info:
        await comments.add_comment(note.id, user.id, content)

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Comment content is required"


async def test_comment_on_missing_note_is_404(comments, user):
    with pytest.raises(HTTPException) as exc_info:
        await comments.add_comment(uuid.uuid4(), user.id, "hello")
    assert exc_info.value.status_code == 404


async def test_list_comments_paginates(comments, user, make_note):
    note = await make_note(user)
    for i in range(3):
        await comments.add_comment(note.id, user.id, f"c{i}")

    items, total = await comments.list_comments(note.id, PageParams(page=1, limit=2))

    assert total == 3
    assert len(items) == 2


async def test_comments_outlive_their_note(comments, user, make_note):
    note = await make_note(user)
    await comments.add_comment(note.id, user.id, "kept")
    await comments.note_repo.delete_note(await comments.note_repo.get_by_id(note.id))

    items, total = await comments.list_comments(note.id, PageParams())

    assert [c.content for c in items] == ["kept"]
    assert total == 1


async def test_only_comment_author_can_delete(comments, user, make_user, make_note):
    note = await make_note(user)
    other = await make_user("Other")
    comment = await comments.add_comment(note.id, other.id, "mine")

    # the note's author does not own the comment
    with pytest.raises(HTTPException) as exc_info:
        await comments.delete_comment(comment.id, user.id)
    assert exc_info.value.status_code == 403
    assert exc_info.value.detail == "Not authorized to delete this comment"

    await comments.delete_comment(comment.id, other.id)
    assert await comments.comment_repo.get_by_id(comment.id) is None


async def test_delete_missing_comment_is_404(comments, user):
    with pytest.raises(HTTPException) as exc_info:
        await comments.delete_comment(uuid.uuid4(), user.id)
    assert exc_info.value.detail == "Comment not found"
