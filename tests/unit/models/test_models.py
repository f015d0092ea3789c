"""Unit tests for model helpers and table constraints."""

import pytest
from sqlalchemy.exc import IntegrityError

from notehive.core.models import Bookmark, Note, Tag, User


def test_short_title_truncates_at_thirty_characters():
    assert Note(title="Short").short_title == "Short"
    assert Note(title="x" * 31).short_title == "x" * 30 + "..."


def test_new_note_starts_without_tags():
    note = Note(title="Fresh")
    assert note.tag_names == []


def test_tag_name_normalization():
    assert Tag.normalize_names([" Math", "math", "", "Physics "]) == ["math", "physics"]
    with pytest.raises(ValueError):
        Tag.normalize_name("   ")


def test_email_normalization():
    assert User.normalize_email("  Ada@Example.COM ") == "ada@example.com"


async def test_bookmark_pair_is_unique(test_session, user, make_note):
    note = await make_note(user)
    test_session.add(Bookmark(user_id=user.id, note_id=note.id))
    await test_session.commit()

    test_session.add(Bookmark(user_id=user.id, note_id=note.id))
    with pytest.raises(IntegrityError):
        await test_session.commit()
