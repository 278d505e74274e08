"""
MangoNote Backend - Note SQLAlchemy Model
===========================================

What:  ORM model representing the `notes` table in PostgreSQL.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteService for lookups and by Alembic for schema management.

Table Design:
    - UUID primary key, server-generated
    - user_id: owner; every read is scoped to it
    - source_type: where the content came from (pdf, audio, text, youtube, ...)
    - content_status: draft -> processing -> completed | failed
    - transcription / markdown: extracted and formatted content
    - created_at / updated_at: UTC with timezone

    Index on (user_id, updated_at DESC):
        Serves the dashboard "recent notes" query for one owner.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Index, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A note created from an imported document, a recording, a video or typed text.

    Query Patterns:
        - Get single note: WHERE id = :uuid AND user_id = :owner
          -> primary key index
        - Recent notes: WHERE user_id = :owner AND content_status = 'completed'
          ORDER BY updated_at DESC LIMIT :n
          -> idx_notes_user_updated
    """

    __tablename__ = "notes"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )

    # ── Ownership ─────────────────────────────────────────────────────────
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        comment="Owner of the note",
    )
    folder_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        nullable=True,
        comment="Optional folder the note is filed under",
    )

    # ── Descriptive Fields ────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(String(500), nullable=False)

    # Values: pdf, audio, text, youtube, import, recording, manual
    source_type: Mapped[str] = mapped_column(String(50), nullable=False)

    # Values: draft, processing, completed, failed
    content_status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="completed",
        server_default=text("'completed'"),
    )

    # ── Content ───────────────────────────────────────────────────────────
    markdown: Mapped[str | None] = mapped_column(Text, nullable=True)
    transcription: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_notes_user_updated", user_id, updated_at.desc()),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, title='{self.title}', "
            f"status='{self.content_status}')>"
        )
