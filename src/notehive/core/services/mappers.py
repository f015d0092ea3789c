# ORM -> response schema conversion shared by the services
from typing import Set
from uuid import UUID

from ..models.comment import Comment
from ..models.note import Note
from ..models.notification import Notification
from ..models.user import User
from ..schemas.auth import UserResponse
from ..schemas.comments import AuthorSummary, CommentResponse
from ..schemas.notes import NoteListItem, NoteResponse
from ..schemas.notifications import NotificationResponse


def author_summary(user: User) -> AuthorSummary:
    return AuthorSummary(id=user.id, name=user.name, avatar=user.avatar)


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id, name=user.name, email=user.email, avatar=user.avatar, bio=user.bio
    )


def _note_fields(note: Note) -> dict:
    return {
        "id": note.id,
        "title": note.title,
        "description": note.description,
        "file_path": note.file_path,
        "file_type": note.file_type,
        "file_size": note.file_size,
        "tags": note.tag_names,
        "downloads": note.downloads,
        "is_public": note.is_public,
        "author": author_summary(note.author),
        "created_at": note.created_at,
        "updated_at": note.updated_at,
    }


def note_to_response(note: Note) -> NoteResponse:
    return NoteResponse(**_note_fields(note))


def note_to_list_item(
    note: Note, liked: Set[UUID], bookmarked: Set[UUID], like_counts: dict
) -> NoteListItem:
    """Annotate a note with one viewer's like/bookmark state."""
    return NoteListItem(
        **_note_fields(note),
        is_liked=note.id in liked,
        is_bookmarked=note.id in bookmarked,
        likes_count=like_counts.get(note.id, 0),
    )


def comment_to_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=comment.id,
        content=comment.content,
        note_id=comment.note_id,
        author=author_summary(comment.author),
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def notification_to_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse.model_validate(notification)
