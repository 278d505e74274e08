"""Create notes and mind_maps tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Initial schema: `notes` and the `mind_maps` built from them.
How:   PostgreSQL-specific types: UUID primary keys (gen_random_uuid()),
       TIMESTAMP WITH TIME ZONE, JSONB for graph documents.

Rollback: downgrade() drops both tables (all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False, comment="Owner of the note"),
        sa.Column("folder_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("source_type", sa.String(50), nullable=False),
        sa.Column(
            "content_status",
            sa.String(50),
            nullable=False,
            server_default=sa.text("'completed'"),
        ),
        sa.Column("markdown", sa.Text(), nullable=True),
        sa.Column("transcription", sa.Text(), nullable=True),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    # Dashboard: newest notes of one owner
    op.create_index(
        "idx_notes_user_updated",
        "notes",
        ["user_id", sa.text("updated_at DESC")],
    )

    op.create_table(
        "mind_maps",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("note_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("nodes", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("edges", postgresql.JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("layout", sa.String(20), nullable=False, server_default=sa.text("'radial'")),
        sa.Column("theme", sa.String(20), nullable=False, server_default=sa.text("'default'")),
        sa.Column("metadata", postgresql.JSONB(), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column("created_by", sa.String(20), nullable=False, server_default=sa.text("'ai'")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["note_id"], ["notes.id"], ondelete="CASCADE"),
    )
    # Latest mind map of a note
    op.create_index(
        "idx_mind_maps_note_created",
        "mind_maps",
        ["note_id", sa.text("created_at DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_mind_maps_note_created", table_name="mind_maps")
    op.drop_table("mind_maps")
    op.drop_index("idx_notes_user_updated", table_name="notes")
    op.drop_table("notes")
