"""Notes API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.context import RequestContext
from ..core.schemas.common import PageParams, SuccessResponse
from ..core.schemas.notes import (
    BookmarkResponse,
    BookmarkState,
    FeedPage,
    LikeResponse,
    NoteCreate,
    NoteDetailEnvelope,
    NoteEnvelope,
    NoteUpdate,
)
from ..core.services import FeedService, InteractionService, NoteService, get_notifier
from ..core.services.notifier import Notifier
from ..core.storage import FileStorage, get_storage
from ..database import get_db_session
from ..middleware.auth import get_current_user_id, get_request_context
from .deps import get_page_params

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=FeedPage)
async def list_notes(
    params: PageParams = Depends(get_page_params),
    search: Optional[str] = Query(None, description="Matches title or description"),
    tags: Optional[str] = Query(None, description="Comma-separated tag names"),
    ctx: RequestContext = Depends(get_request_context),
    session: AsyncSession = Depends(get_db_session),
):
    """Paginated feed, newest first, annotated for the viewer."""
    feed_service = FeedService(session)
    return await feed_service.list_notes(params, ctx, search=search, tags=tags)


@router.post("", response_model=NoteEnvelope, status_code=status.HTTP_201_CREATED)
async def create_note(
    title: str = Form(...),
    description: str = Form(...),
    tags: Optional[str] = Form(None),
    is_public: bool = Form(True, alias="isPublic"),
    file: Optional[UploadFile] = File(None),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
    storage: FileStorage = Depends(get_storage),
):
    """Upload a file with its metadata."""
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is required")

    try:
        request = NoteCreate(title=title, description=description, tags=tags, is_public=is_public)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    stored = await storage.save(file)
    note_service = NoteService(session, notifier, storage)
    return NoteEnvelope(data=await note_service.create_note(current_user_id, request, stored))


@router.get("/{note_id}", response_model=NoteDetailEnvelope)
async def get_note(
    note_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a note with its comments and the viewer's like/bookmark state."""
    feed_service = FeedService(session)
    return NoteDetailEnvelope(data=await feed_service.get_note(note_id, ctx))


@router.put("/{note_id}", response_model=NoteEnvelope)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
    storage: FileStorage = Depends(get_storage),
):
    note_service = NoteService(session, notifier, storage)
    return NoteEnvelope(data=await note_service.update_note(note_id, current_user_id, request))


@router.delete("/{note_id}", response_model=SuccessResponse)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
    storage: FileStorage = Depends(get_storage),
):
    note_service = NoteService(session, notifier, storage)
    await note_service.delete_note(note_id, current_user_id)
    return SuccessResponse(message="Note deleted successfully")


@router.put("/{note_id}/like", response_model=LikeResponse)
async def like_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
):
    """Toggle the caller's like."""
    interaction_service = InteractionService(session, notifier)
    is_liked, likes_count = await interaction_service.toggle_like(note_id, current_user_id)
    return LikeResponse(is_liked=is_liked, likes_count=likes_count)


@router.put("/{note_id}/bookmark", response_model=BookmarkResponse)
async def bookmark_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
):
    """Toggle the note in the caller's bookmarks."""
    interaction_service = InteractionService(session, notifier)
    is_bookmarked, bookmark_ids = await interaction_service.toggle_bookmark(
        note_id, current_user_id
    )
    return BookmarkResponse(
        data=BookmarkState(is_bookmarked=is_bookmarked, bookmark_ids=bookmark_ids)
    )


@router.get("/{note_id}/download")
async def download_note(
    note_id: UUID,
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
    storage: FileStorage = Depends(get_storage),
):
    """Stream the file and count the download."""
    note_service = NoteService(session, notifier, storage)
    path, filename = await note_service.download_note(note_id)
    return FileResponse(path, filename=filename)
