"""Unit tests for profiles and password changes."""

import io
import uuid

import pytest
from fastapi import HTTPException, UploadFile

from notehive.core.context import ANONYMOUS, RequestContext
from notehive.core.repositories.follow_repository import FollowRepository
from notehive.core.schemas.users import PasswordChangeRequest, ProfileUpdate
from notehive.core.services.user_service import UserService
from notehive.security import verify_password

TEST_PASSWORD = "secret123"


@pytest.fixture
def users(test_session, storage):
    return UserService(test_session, storage)


async def _avatar(storage, name="me.png"):
    return await storage.save(UploadFile(file=io.BytesIO(b"\x89PNG"), filename=name))


class TestUpdateProfile:
    async def test_only_given_fields_change(self, users, make_user):
        user = await make_user("Ada", bio="old bio")

        result = await users.update_profile(user.id, ProfileUpdate(name="  Ada L.  "))

        assert result.name == "Ada L."
        assert result.bio == "old bio"

    async def test_blank_name_is_ignored(self, users, user):
        result = await users.update_profile(user.id, ProfileUpdate(name="   ", bio="hi"))

        assert result.name == "Ada"
        assert result.bio == "hi"

    async def test_new_avatar_replaces_old_file(self, users, storage, user):
        first = await _avatar(storage, "one.png")
        await users.update_profile(user.id, ProfileUpdate(), avatar=first)
        second = await _avatar(storage, "two.png")

        result = await users.update_profile(user.id, ProfileUpdate(), avatar=second)

        assert result.avatar == second.path
        assert storage.exists(second.path)
        assert storage.exists(first.path) is False


class TestChangePassword:
    async def test_change_password(self, users, user):
        await users.change_password(
            user.id,
            PasswordChangeRequest(current_password=TEST_PASSWORD, new_password="brand-new"),
        )

        refreshed = await users.user_repo.get_by_id(user.id)
        assert verify_password("brand-new", refreshed.password_hash)

    async def test_wrong_current_password_is_401(self, users, user):
        with pytest.raises(HTTPException) as exc_info:
            await users.change_password(
                user.id,
                PasswordChangeRequest(current_password="nope", new_password="brand-new"),
            )
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Current password is incorrect"

    async def test_missing_fields_is_400(self, users, user):
        with pytest.raises(HTTPException) as exc_info:
            await users.change_password(user.id, PasswordChangeRequest(new_password="brand-new"))
        assert exc_info.value.status_code == 400


class TestPublicProfile:
    async def test_counts_and_follow_flag(self, users, session_factory, user, make_user, make_note):
        fan = await make_user("Fan")
        async with session_factory() as session:
            await FollowRepository(session).follow(fan.id, user.id)
        await make_note(user)
        await make_note(user)

        seen_by_fan = await users.get_public_profile(user.id, RequestContext(viewer_id=fan.id))
        seen_anonymously = await users.get_public_profile(user.id, ANONYMOUS)

        assert seen_by_fan.followers_count == 1
        assert seen_by_fan.following_count == 0
        assert seen_by_fan.notes_count == 2
        assert seen_by_fan.is_following is True
        assert seen_anonymously.is_following is False

    async def test_profile_has_no_email(self, users, user):
        profile = await users.get_public_profile(user.id, ANONYMOUS)
        assert "email" not in profile.model_dump()

    async def test_unknown_user_is_404(self, users):
        with pytest.raises(HTTPException) as exc_info:
            await users.get_public_profile(uuid.uuid4(), ANONYMOUS)
        assert exc_info.value.status_code == 404
