"""
MangoNote Backend - Flashcard SQLAlchemy Models
=================================================

What:  ORM models for the `flashcards` and `flashcard_reviews` tables.
Who:   FlashcardService reads cards of a note together with review statistics.

Table Design:
    flashcards:         question/answer pairs generated from a note
                        (cascade delete with the note)
    flashcard_reviews:  one row per review; difficulty is 'easy' or 'hard'

    Index on flashcards (note_id, created_at):
        Serves "cards of this note, oldest first".
    Index on flashcard_reviews (flashcard_id):
        Serves the per-card review aggregate.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Flashcard(Base):
    """A question/answer card generated from a note."""

    __tablename__ = "flashcards"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    note_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("notes.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)

    question: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_flashcards_note_created", note_id, created_at),
    )

    def __repr__(self) -> str:
        return f"<Flashcard(id={self.id}, note_id={self.note_id})>"


class FlashcardReview(Base):
    """A single review of a flashcard by its owner."""

    __tablename__ = "flashcard_reviews"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    flashcard_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("flashcards.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), nullable=False)

    # Values: easy, hard
    difficulty: Mapped[str] = mapped_column(String(10), nullable=False)
    response_time_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_flashcard_reviews_flashcard", flashcard_id),
    )
