"""Create flashcards and flashcard_reviews tables

Revision ID: 002
Revises: 001
Create Date: 2024-06-15 00:00:00.000000+00:00

What:  Study cards generated from notes and the reviews recorded for them.

Rollback: downgrade() drops both tables (all cards and review history lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "flashcards",
        _id_column(),
        sa.Column("note_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("answer", sa.Text(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["note_id"], ["notes.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_flashcards_note_created", "flashcards", ["note_id", "created_at"])

    op.create_table(
        "flashcard_reviews",
        _id_column(),
        sa.Column("flashcard_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("difficulty", sa.String(10), nullable=False),
        sa.Column("response_time_ms", sa.Integer(), nullable=True),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["flashcard_id"], ["flashcards.id"], ondelete="CASCADE"),
        sa.CheckConstraint("difficulty IN ('easy', 'hard')", name="ck_flashcard_reviews_difficulty"),
    )
    op.create_index("idx_flashcard_reviews_flashcard", "flashcard_reviews", ["flashcard_id"])


def downgrade() -> None:
    op.drop_index("idx_flashcard_reviews_flashcard", table_name="flashcard_reviews")
    op.drop_table("flashcard_reviews")
    op.drop_index("idx_flashcards_note_created", table_name="flashcards")
    op.drop_table("flashcards")
