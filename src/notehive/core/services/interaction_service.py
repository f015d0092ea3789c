"""
Social toggles: likes, bookmarks and follows.

Each toggle commits its own row change before any notification is sent, so a
failed notification can never undo the interaction.
"""

from typing import List, Tuple
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..repositories.bookmark_repository import BookmarkRepository
from ..repositories.follow_repository import FollowRepository
from ..repositories.note_repository import NoteRepository
from ..repositories.user_repository import UserRepository
from .access import not_found
from .interfaces import IInteractionService
from .notifier import Notifier

logger = get_logger("interactions")


class InteractionService(IInteractionService):
    def __init__(self, session: AsyncSession, notifier: Notifier):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.bookmark_repo = BookmarkRepository(session)
        self.follow_repo = FollowRepository(session)
        self.user_repo = UserRepository(session)
        self.notifier = notifier

    async def toggle_like(self, note_id: UUID, user_id: UUID) -> Tuple[bool, int]:
        """Like or unlike; returns the new state and like count."""
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise not_found("Note")
        author_id, short_title = note.author_id, note.short_title

        if await self.note_repo.has_liked(note_id, user_id):
            await self.note_repo.remove_like(note_id, user_id)
            is_liked = False
        else:
            is_liked = True
            try:
                await self.note_repo.add_like(note_id, user_id)
            except IntegrityError:
                # concurrent like from the same user already landed and notified
                await self.session.rollback()
                return is_liked, await self.note_repo.count_likes(note_id)

            if author_id != user_id:
                liker = await self.user_repo.get_by_id(user_id)
                if liker:
                    await self.notifier.notify(
                        author_id, f'{liker.name} liked your note "{short_title}"'
                    )

        likes_count = await self.note_repo.count_likes(note_id)
        return is_liked, likes_count

    async def toggle_bookmark(self, note_id: UUID, user_id: UUID) -> Tuple[bool, List[UUID]]:
        """Add or remove from the user's bookmarks; returns state and the full list."""
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise not_found("Note")

        if await self.bookmark_repo.is_bookmarked(user_id, note_id):
            await self.bookmark_repo.remove(user_id, note_id)
            is_bookmarked = False
        else:
            try:
                await self.bookmark_repo.add(user_id, note_id)
            except IntegrityError:
                await self.session.rollback()
            is_bookmarked = True

        return is_bookmarked, await self.bookmark_repo.get_note_ids(user_id)

    async def toggle_follow(self, target_id: UUID, caller_id: UUID) -> Tuple[bool, str]:
        """Follow or unfollow ``target_id``; both sides change in one commit."""
        if target_id == caller_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot follow yourself"
            )

        target = await self.user_repo.get_by_id(target_id)
        if not target:
            raise not_found("User")
        caller = await self.user_repo.get_by_id(caller_id)
        if not caller:
            raise not_found("User")
        # rollback below expires loaded rows
        target_name, caller_name = target.name, caller.name

        if await self.follow_repo.is_following(caller_id, target_id):
            await self.follow_repo.unfollow(caller_id, target_id)
            await self.notifier.notify(target_id, f"{caller_name} has unfollowed you.")
            return False, f"You have unfollowed {target_name}"

        try:
            await self.follow_repo.follow(caller_id, target_id)
        except IntegrityError:
            await self.session.rollback()
            return True, f"You are now following {target_name}"

        logger.info(
            "User followed",
            extra={"follower_id": str(caller_id), "followed_id": str(target_id)},
        )
        await self.notifier.notify(target_id, f"{caller_name} has started following you.")
        return True, f"You are now following {target_name}"
