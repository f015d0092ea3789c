"""Comment endpoints, nested under their note."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.comments import CommentCreate, CommentEnvelope, CommentResponse
from ..core.schemas.common import PageParams, PaginatedResponse, SuccessResponse
from ..core.services import CommentService, get_notifier
from ..core.services.notifier import Notifier
from ..database import get_db_session
from ..middleware.auth import get_current_user_id
from .deps import get_page_params

router = APIRouter(prefix="/notes/{note_id}/comments", tags=["comments"])


@router.get("", response_model=PaginatedResponse[CommentResponse])
async def list_comments(
    note_id: UUID,
    params: PageParams = Depends(get_page_params),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
):
    """Comments on a note, newest first."""
    comment_service = CommentService(session, notifier)
    comments, total = await comment_service.list_comments(note_id, params)
    return PaginatedResponse[CommentResponse].create(comments, total, params)


@router.post("", response_model=CommentEnvelope, status_code=status.HTTP_201_CREATED)
async def add_comment(
    note_id: UUID,
    request: CommentCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
):
    comment_service = CommentService(session, notifier)
    comment = await comment_service.add_comment(note_id, current_user_id, request.content)
    return CommentEnvelope(data=comment)


@router.delete("/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    note_id: UUID,
    comment_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
    notifier: Notifier = Depends(get_notifier),
):
    comment_service = CommentService(session, notifier)
    await comment_service.delete_comment(comment_id, current_user_id)
    return SuccessResponse(message="Comment deleted successfully")
