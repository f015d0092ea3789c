"""Note service implementation."""

from pathlib import Path
from typing import Tuple
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..repositories.follow_repository import FollowRepository
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..storage import FileStorage, StoredFile
from .access import ensure_owner, not_found
from .interfaces import INoteService
from .mappers import note_to_response
from .notifier import Notifier

logger = get_logger("notes")


class NoteService(INoteService):
    """Note writes: create, update, delete and download."""

    def __init__(self, session: AsyncSession, notifier: Notifier, storage: FileStorage):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.user_repo = UserRepository(session)
        self.follow_repo = FollowRepository(session)
        self.notifier = notifier
        self.storage = storage

    async def create_note(
        self, author_id: UUID, request: NoteCreate, stored: StoredFile
    ) -> NoteResponse:
        """Create the record for an already stored file, then notify."""
        note_data = {
            "title": request.title,
            "description": request.description,
            "is_public": request.is_public,
            "file_path": stored.path,
            "file_type": stored.file_type,
            "file_size": stored.size,
            "author_id": author_id,
        }
        try:
            note = await self.note_repo.create_note(note_data, request.tags)
        except Exception:
            await self.session.rollback()
            self.storage.delete(stored.path)
            raise

        logger.info("Note created", extra={"note_id": str(note.id), "author_id": str(author_id)})

        await self.notifier.notify(
            author_id, f'Your note "{note.title}" has been successfully uploaded.'
        )
        follower_ids = await self.follow_repo.get_follower_ids(author_id)
        if follower_ids:
            await self.notifier.notify_many(
                follower_ids, f'{note.author.name} has uploaded a new note: "{note.title}"'
            )

        return note_to_response(note)

    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Only provided, non-empty fields change."""
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise not_found("Note")
        ensure_owner(note.author_id, user_id, "update this note")

        update_data = request.model_dump(exclude_none=True, exclude={"tags"})
        note = await self.note_repo.update_note(note, update_data, tag_names=request.tags)
        return note_to_response(note)

    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise not_found("Note")
        ensure_owner(note.author_id, user_id, "delete this note")

        file_path = note.file_path
        await self.note_repo.delete_note(note)
        logger.info("Note deleted", extra={"note_id": str(note_id)})

        # the record is gone either way; a stray file is only logged
        self.storage.delete(file_path)

    async def download_note(self, note_id: UUID) -> Tuple[Path, str]:
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise not_found("Note")

        path = self.storage.resolve(note.file_path)
        if path is None or not path.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")

        await self.note_repo.increment_downloads(note_id)
        return path, path.name
