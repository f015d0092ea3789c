"""User profile service implementation."""

from typing import Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import hash_password, verify_password
from ..context import RequestContext
from ..logging import get_logger
from ..repositories.follow_repository import FollowRepository
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import UserResponse
from ..schemas.users import PasswordChangeRequest, ProfileUpdate, PublicProfile
from ..storage import FileStorage, StoredFile
from .access import not_found
from .interfaces import IUserService
from .mappers import user_to_response

logger = get_logger("users")


class UserService(IUserService):
    """Profile edits, password changes and public profiles."""

    def __init__(self, session: AsyncSession, storage: FileStorage):
        self.session = session
        self.user_repo = UserRepository(session)
        self.follow_repo = FollowRepository(session)
        self.note_repo = NoteRepository(session)
        self.storage = storage

    async def update_profile(
        self, user_id: UUID, request: ProfileUpdate, avatar: Optional[StoredFile] = None
    ) -> UserResponse:
        """Change only the provided fields; a new avatar replaces the old file."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            if avatar:
                self.storage.delete(avatar.path)
            raise not_found("User")

        update_data = {}
        if request.name is not None and request.name.strip():
            update_data["name"] = request.name.strip()
        if request.bio is not None:
            update_data["bio"] = request.bio

        old_avatar = user.avatar
        if avatar:
            update_data["avatar"] = avatar.path

        if update_data:
            user = await self.user_repo.update_user(user_id, update_data)

        if avatar and old_avatar and old_avatar != avatar.path:
            self.storage.delete(old_avatar)

        return user_to_response(user)

    async def change_password(self, user_id: UUID, request: PasswordChangeRequest) -> None:
        if not request.current_password or not request.new_password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Please provide current password and new password",
            )

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise not_found("User")

        if not verify_password(request.current_password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Current password is incorrect"
            )

        await self.user_repo.update_user(
            user_id, {"password_hash": hash_password(request.new_password)}
        )
        logger.info("Password changed", extra={"user_id": str(user_id)})

    async def get_public_profile(self, user_id: UUID, ctx: RequestContext) -> PublicProfile:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise not_found("User")

        is_following = False
        if ctx.viewer_id is not None and ctx.viewer_id != user_id:
            is_following = await self.follow_repo.is_following(ctx.viewer_id, user_id)

        return PublicProfile(
            id=user.id,
            name=user.name,
            avatar=user.avatar,
            bio=user.bio,
            followers_count=await self.follow_repo.count_followers(user_id),
            following_count=await self.follow_repo.count_following(user_id),
            notes_count=await self.note_repo.count_by_author(user_id),
            is_following=is_following,
        )
