"""Comment service implementation."""

from typing import List, Optional, Tuple
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories.comment_repository import CommentRepository
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.comments import CommentResponse
from ..schemas.common import PageParams
from .access import ensure_owner, not_found
from .interfaces import ICommentService
from .mappers import comment_to_response
from .notifier import Notifier


class CommentService(ICommentService):
    def __init__(self, session: AsyncSession, notifier: Notifier):
        self.session = session
        self.comment_repo = CommentRepository(session)
        self.note_repo = NoteRepository(session)
        self.user_repo = UserRepository(session)
        self.notifier = notifier

    async def add_comment(
        self, note_id: UUID, author_id: UUID, content: Optional[str]
    ) -> CommentResponse:
        """Store a trimmed comment and tell the note's author."""
        text = (content or "").strip()
        if not text:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Comment content is required"
            )

        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise not_found("Note")

        comment = await self.comment_repo.create_comment(
            {"content": text, "author_id": author_id, "note_id": note_id}
        )

        if not note.is_owned_by(author_id):
            await self.notifier.notify(
                note.author_id,
                f'{comment.author.name} commented on your note "{note.short_title}"',
            )

        return comment_to_response(comment)

    async def list_comments(
        self, note_id: UUID, params: PageParams
    ) -> Tuple[List[CommentResponse], int]:
        # no note lookup: comments of a deleted note are still listed
        comments, total = await self.comment_repo.list_for_note(
            note_id, offset=params.offset, limit=params.limit
        )
        return [comment_to_response(c) for c in comments], total

    async def delete_comment(self, comment_id: UUID, user_id: UUID) -> None:
        comment = await self.comment_repo.get_by_id(comment_id)
        if not comment:
            raise not_found("Comment")
        ensure_owner(comment.author_id, user_id, "delete this comment")
        await self.comment_repo.delete_comment(comment)
