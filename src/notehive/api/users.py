"""User profile and social graph endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.context import RequestContext
from ..core.schemas.common import PageParams, PaginatedResponse, SuccessResponse
from ..core.schemas.notes import NoteListItem
from ..core.schemas.users import (
    FollowResponse,
    PasswordChangeRequest,
    ProfileResponse,
    ProfileUpdate,
    PublicProfileData,
    PublicProfileResponse,
)
from ..core.services import FeedService, InteractionService, UserService, get_notifier
from ..core.services.notifier import Notifier
from ..core.storage import FileStorage, get_storage
from ..database import get_db_session
from ..middleware.auth import get_current_user_id, get_request_context
from .deps import get_page_params

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    name: Optional[str] = Form(None),
    bio: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    storage: FileStorage = Depends(get_storage),
):
    """Update name, bio and avatar; omitted fields stay as they are."""
    stored = await storage.save(avatar) if avatar is not None and avatar.filename else None
    user_service = UserService(session, storage)
    user = await user_service.update_profile(
        current_user_id, ProfileUpdate(name=name, bio=bio), avatar=stored
    )
    return ProfileResponse(data=user)


@router.put("/password", response_model=SuccessResponse)
async def change_password(
    request: PasswordChangeRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    storage: FileStorage = Depends(get_storage),
):
    user_service = UserService(session, storage)
    await user_service.change_password(current_user_id, request)
    return SuccessResponse(message="Password updated successfully")


@router.get("/notes", response_model=PaginatedResponse[NoteListItem])
async def get_user_notes(
    params: PageParams = Depends(get_page_params),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """The caller's own uploads, newest first."""
    feed_service = FeedService(session)
    notes, total = await feed_service.list_user_notes(current_user_id, params)
    return PaginatedResponse[NoteListItem].create(notes, total, params)


@router.get("/bookmarks", response_model=PaginatedResponse[NoteListItem])
async def get_bookmarked_notes(
    params: PageParams = Depends(get_page_params),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    feed_service = FeedService(session)
    notes, total = await feed_service.list_bookmarks(current_user_id, params)
    return PaginatedResponse[NoteListItem].create(notes, total, params)


@router.post("/{user_id}/follow", response_model=FollowResponse)
async def follow_user(
    user_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
):
    """Follow, or unfollow when already following."""
    interaction_service = InteractionService(session, notifier)
    is_following, message = await interaction_service.toggle_follow(user_id, current_user_id)
    return FollowResponse(is_following=is_following, message=message)


@router.get("/{user_id}", response_model=PublicProfileResponse)
async def get_user_profile(
    user_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    session: AsyncSession = Depends(get_db_session),
    storage: FileStorage = Depends(get_storage),
):
    """Public profile with follower, following and note counts."""
    user_service = UserService(session, storage)
    profile = await user_service.get_public_profile(user_id, ctx)
    return PublicProfileResponse(data=PublicProfileData(user=profile))
