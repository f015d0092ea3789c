"""
Feed query service.

Read-only listings of notes. Every listing is annotated for the viewer at
query time: two lookups scoped to the returned page (the viewer's likes and
bookmarks among those ids) plus aggregate like counts. Like identities never
leave the repository layer.
"""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..context import RequestContext
from ..models.note import Note
from ..repositories.bookmark_repository import BookmarkRepository
from ..repositories.comment_repository import CommentRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.common import PageParams
from ..schemas.notes import FeedPage, NoteDetail, NoteListItem, split_tags
from .access import not_found
from .interfaces import IFeedService
from .mappers import comment_to_response, note_to_list_item


class FeedService(IFeedService):
    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.bookmark_repo = BookmarkRepository(session)
        self.comment_repo = CommentRepository(session)

    async def annotate(self, notes: List[Note], viewer_id: Optional[UUID]) -> List[NoteListItem]:
        """Attach like counts and the viewer's like/bookmark flags."""
        note_ids = [note.id for note in notes]
        like_counts = await self.note_repo.like_counts(note_ids)

        liked, bookmarked = set(), set()
        if viewer_id is not None:
            liked = await self.note_repo.liked_note_ids(viewer_id, note_ids)
            bookmarked = await self.bookmark_repo.bookmarked_among(viewer_id, note_ids)

        return [note_to_list_item(note, liked, bookmarked, like_counts) for note in notes]

    async def list_notes(
        self,
        params: PageParams,
        ctx: RequestContext,
        search: Optional[str] = None,
        tags: Optional[str] = None,
    ) -> FeedPage:
        """Paginated feed filtered by search term and tags, newest first."""
        term = search.strip() if search else None
        tag_filter = split_tags(tags) if tags else None

        notes, total = await self.note_repo.list_feed(
            offset=params.offset,
            limit=params.limit,
            search=term or None,
            tags=tag_filter or None,
        )
        items = await self.annotate(notes, ctx.viewer_id)

        return FeedPage(
            data=items,
            current_page=params.page,
            total_pages=params.total_pages(total),
            total=total,
        )

    async def get_note(self, note_id: UUID, ctx: RequestContext) -> NoteDetail:
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise not_found("Note")

        [item] = await self.annotate([note], ctx.viewer_id)
        comments, comments_count = await self.comment_repo.list_for_note(note_id, offset=0)

        return NoteDetail(
            **item.model_dump(),
            comments_count=comments_count,
            comments=[comment_to_response(c) for c in comments],
        )

    async def list_user_notes(
        self, user_id: UUID, params: PageParams
    ) -> Tuple[List[NoteListItem], int]:
        """The caller's own notes."""
        notes, total = await self.note_repo.list_by_author(user_id, params.offset, params.limit)
        return await self.annotate(notes, user_id), total

    async def list_bookmarks(
        self, user_id: UUID, params: PageParams
    ) -> Tuple[List[NoteListItem], int]:
        notes, total = await self.bookmark_repo.list_notes(user_id, params.offset, params.limit)
        return await self.annotate(notes, user_id), total
