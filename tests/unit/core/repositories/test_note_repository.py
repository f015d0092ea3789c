"""Unit tests for NoteRepository."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from notehive.core.models import Tag
from notehive.core.repositories.note_repository import NoteRepository, escape_like


@pytest.fixture
def repo(test_session):
    return NoteRepository(test_session)


@pytest.mark.parametrize(
    "term, expected",
    [
        ("algebra", "algebra"),
        ("100%", "100\\%"),
        ("snake_case", "snake\\_case"),
        ("back\\slash", "back\\\\slash"),
    ],
)
def test_escape_like(term, expected):
    assert escape_like(term) == expected


async def test_tags_are_shared_between_notes(repo, test_session, user, make_note):
    first = await make_note(user, tags=["Math", "math ", "algebra"])
    second = await make_note(user, tags=["MATH"])

    assert first.tag_names == ["algebra", "math"]
    assert second.tag_names == ["math"]
    assert await test_session.scalar(select(func.count(Tag.id))) == 2


async def test_increment_downloads_returns_new_value(repo, user, make_note):
    note = await make_note(user)

    assert await repo.increment_downloads(note.id) == 1
    assert await repo.increment_downloads(note.id) == 2


async def test_like_is_unique_per_user(repo, user, make_note):
    note = await make_note(user)
    await repo.add_like(note.id, user.id)

    with pytest.raises(IntegrityError):
        await repo.add_like(note.id, user.id)
    await repo.session.rollback()

    assert await repo.count_likes(note.id) == 1


async def test_like_counts_and_liked_ids(repo, user, make_user, make_note):
    other = await make_user("Other")
    popular = await make_note(user, title="Popular")
    quiet = await make_note(user, title="Quiet")
    await repo.add_like(popular.id, user.id)
    await repo.add_like(popular.id, other.id)

    counts = await repo.like_counts([popular.id, quiet.id])
    liked = await repo.liked_note_ids(other.id, [popular.id, quiet.id])

    assert counts == {popular.id: 2}
    assert liked == {popular.id}
    assert await repo.like_counts([]) == {}


async def test_remove_like_reports_whether_anything_changed(repo, user, make_note):
    note = await make_note(user)
    await repo.add_like(note.id, user.id)

    assert await repo.remove_like(note.id, user.id) is True
    assert await repo.remove_like(note.id, user.id) is False
    assert await repo.has_liked(note.id, user.id) is False
