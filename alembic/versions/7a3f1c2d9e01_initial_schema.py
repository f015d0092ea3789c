"""Initial schema: users, follows, notes, tags, likes, bookmarks, comments, notifications

Revision ID: 7a3f1c2d9e01
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "7a3f1c2d9e01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns():
    return [
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _user_fk(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=nullable,
    )


def _note_fk(name: str = "note_id") -> sa.Column:
    return sa.Column(
        name,
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("notes.id", ondelete="CASCADE"),
        nullable=False,
    )


def _created_index(table: str) -> None:
    op.create_index(f"ix_{table}_created_at", table, ["created_at"])


def upgrade() -> None:
    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("avatar", sa.String(length=500), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.CheckConstraint("length(name) <= 100", name="ck_users_name_len"),
        sa.CheckConstraint("email = lower(email)", name="ck_users_email_lowercase"),
    )
    op.create_index("idx_users_email", "users", ["email"])
    _created_index("users")

    op.create_table(
        "follows",
        *_base_columns(),
        _user_fk("follower_id"),
        _user_fk("followed_id"),
        sa.UniqueConstraint("follower_id", "followed_id", name="uq_follows_pair"),
        sa.CheckConstraint("follower_id <> followed_id", name="ck_follows_not_self"),
    )
    op.create_index("idx_follows_follower", "follows", ["follower_id"])
    op.create_index("idx_follows_followed", "follows", ["followed_id"])
    _created_index("follows")

    op.create_table(
        "notes",
        *_base_columns(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("file_path", sa.String(length=500), nullable=False),
        sa.Column("file_type", sa.String(length=20), nullable=False),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("downloads", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.true()),
        _user_fk("author_id"),
        sa.CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
        sa.CheckConstraint("downloads >= 0", name="ck_notes_downloads_positive"),
    )
    op.create_index("idx_notes_author_id", "notes", ["author_id"])
    op.create_index("idx_notes_author_created", "notes", ["author_id", "created_at"])
    _created_index("notes")

    op.create_table(
        "tags",
        *_base_columns(),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.UniqueConstraint("name", name="uq_tags_name"),
        sa.CheckConstraint("name = lower(name)", name="ck_tags_name_lowercase"),
        sa.CheckConstraint("length(name) <= 50", name="ck_tags_name_len"),
    )
    op.create_index("idx_tags_name", "tags", ["name"])
    _created_index("tags")

    op.create_table(
        "note_tags",
        *_base_columns(),
        _note_fk(),
        sa.Column(
            "tag_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint("note_id", "tag_id", name="uq_note_tags_note_tag"),
    )
    op.create_index("idx_note_tags_note_id", "note_tags", ["note_id"])
    op.create_index("idx_note_tags_tag_id", "note_tags", ["tag_id"])
    _created_index("note_tags")

    op.create_table(
        "note_likes",
        *_base_columns(),
        _note_fk(),
        _user_fk("user_id"),
        sa.UniqueConstraint("note_id", "user_id", name="uq_note_likes_pair"),
    )
    op.create_index("idx_note_likes_note", "note_likes", ["note_id"])
    op.create_index("idx_note_likes_user", "note_likes", ["user_id"])
    _created_index("note_likes")

    op.create_table(
        "bookmarks",
        *_base_columns(),
        _user_fk("user_id"),
        _note_fk(),
        sa.UniqueConstraint("user_id", "note_id", name="uq_bookmarks_pair"),
    )
    op.create_index("idx_bookmarks_user_created", "bookmarks", ["user_id", "created_at"])
    _created_index("bookmarks")

    # note_id has no foreign key: comments outlive their note
    op.create_table(
        "comments",
        *_base_columns(),
        sa.Column("content", sa.Text(), nullable=False),
        _user_fk("author_id"),
        sa.Column("note_id", postgresql.UUID(as_uuid=True), nullable=False),
    )
    op.create_index("idx_comments_note_created", "comments", ["note_id", "created_at"])
    op.create_index("idx_comments_author", "comments", ["author_id"])
    _created_index("comments")

    op.create_table(
        "notifications",
        *_base_columns(),
        _user_fk("user_id"),
        sa.Column("message", sa.String(length=500), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index(
        "idx_notifications_user_created", "notifications", ["user_id", "created_at"]
    )
    op.create_index("idx_notifications_user_read", "notifications", ["user_id", "read"])
    _created_index("notifications")


def downgrade() -> None:
    for table in (
        "notifications",
        "comments",
        "bookmarks",
        "note_likes",
        "note_tags",
        "tags",
        "notes",
        "follows",
        "users",
    ):
        op.drop_table(table)
