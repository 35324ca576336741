"""initial_schema_galleries_albums_tags_roles_settings

Revision ID: 3f8a1c2d9b47
Revises:
Create Date: 2026-10-19 09:12:44.118201

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f8a1c2d9b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "gallery",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("allow_anonymous_browsing", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "album",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("gallery_id", sa.Integer(), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("is_private", sa.Boolean(), nullable=False),
        sa.Column("seq", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["gallery_id"], ["gallery.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["album.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_album_gallery_id"), "album", ["gallery_id"], unique=False)
    op.create_index(
        "ix_album_gallery_parent", "album", ["gallery_id", "parent_id"], unique=False
    )

    op.create_table(
        "media_object",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("album_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("seq", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["album_id"], ["album.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_media_object_album_id"), "media_object", ["album_id"], unique=False
    )

    op.create_table(
        "metadata",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meta_name", sa.String(), nullable=False),
        sa.Column("album_id", sa.Integer(), nullable=True),
        sa.Column("media_object_id", sa.Integer(), nullable=True),
        sa.Column("value", sa.Text(), nullable=False),
        sa.CheckConstraint(
            "(album_id IS NULL) <> (media_object_id IS NULL)",
            name="metadata_owner_check",
        ),
        sa.ForeignKeyConstraint(["album_id"], ["album.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["media_object_id"], ["media_object.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_metadata_meta_name"), "metadata", ["meta_name"], unique=False)
    op.create_index(op.f("ix_metadata_album_id"), "metadata", ["album_id"], unique=False)
    op.create_index(
        op.f("ix_metadata_media_object_id"), "metadata", ["media_object_id"], unique=False
    )

    op.create_table(
        "tag",
        sa.Column("tag_name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("tag_name"),
    )

    op.create_table(
        "metadata_tag",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("gallery_id", sa.Integer(), nullable=False),
        sa.Column("metadata_id", sa.Integer(), nullable=False),
        sa.Column("tag_name", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(["gallery_id"], ["gallery.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["metadata_id"], ["metadata.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_name"], ["tag.tag_name"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_metadata_tag_gallery_id"), "metadata_tag", ["gallery_id"], unique=False
    )
    op.create_index(
        "ix_metadata_tag_gallery_tag",
        "metadata_tag",
        ["gallery_id", "tag_name"],
        unique=False,
    )
    op.create_index(
        "ix_metadata_tag_metadata", "metadata_tag", ["metadata_id"], unique=False
    )

    op.create_table(
        "gallery_role",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("role_name", sa.String(), nullable=False),
        sa.Column("allow_view_album", sa.Boolean(), nullable=False),
        sa.Column("allow_administer_site", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("role_name"),
    )

    op.create_table(
        "role_album",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("role_id", sa.Integer(), nullable=False),
        sa.Column("album_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["role_id"], ["gallery_role.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["album_id"], ["album.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("role_id", "album_id", name="uq_role_album"),
    )

    op.create_table(
        "app_setting",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("setting_name", sa.String(), nullable=False),
        sa.Column("setting_value", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("setting_name"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("app_setting")
    op.drop_table("role_album")
    op.drop_table("gallery_role")
    op.drop_index("ix_metadata_tag_metadata", table_name="metadata_tag")
    op.drop_index("ix_metadata_tag_gallery_tag", table_name="metadata_tag")
    op.drop_index(op.f("ix_metadata_tag_gallery_id"), table_name="metadata_tag")
    op.drop_table("metadata_tag")
    op.drop_table("tag")
    op.drop_index(op.f("ix_metadata_media_object_id"), table_name="metadata")
    op.drop_index(op.f("ix_metadata_album_id"), table_name="metadata")
    op.drop_index(op.f("ix_metadata_meta_name"), table_name="metadata")
    op.drop_table("metadata")
    op.drop_index(op.f("ix_media_object_album_id"), table_name="media_object")
    op.drop_table("media_object")
    op.drop_index("ix_album_gallery_parent", table_name="album")
    op.drop_index(op.f("ix_album_gallery_id"), table_name="album")
    op.drop_table("album")
    op.drop_table("gallery")
