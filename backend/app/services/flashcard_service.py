"""
MangoNote Backend - Flashcard Service
=======================================

What:  Read access to the flashcards generated from a note.
How:   One query joins each card with an aggregate over its reviews
       (count, last review, share of 'easy' answers).
Who:   Called by the flashcard route handler.

Return conventions match NoteService: None when the note identifier cannot
match anything, DatabaseError when the query fails. A note without cards
is an empty list, not None.
"""

import logging
from typing import Optional

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.flashcard import Flashcard, FlashcardReview
from app.schemas.flashcard import FlashcardList, FlashcardResponse
from app.services.identifiers import owner_id, parse_identifier

logger = logging.getLogger(__name__)


class FlashcardService:
    """Business logic layer for flashcard reads."""

    async def get_flashcards_by_note_id(
        self, db: AsyncSession, note_id: str
    ) -> Optional[FlashcardList]:
        """
        Cards of a note, oldest first, with the owner's review statistics.

        Query plan:
            SELECT f.*, COALESCE(r.review_count, 0), r.last_reviewed,
                   COALESCE(r.difficulty_average, 0)
            FROM flashcards f
            LEFT JOIN (SELECT flashcard_id, COUNT(*), MAX(created_at),
                              AVG(CASE WHEN difficulty = 'easy' THEN 1 ELSE 0 END)
                       FROM flashcard_reviews WHERE user_id = :owner
                       GROUP BY flashcard_id) r ON r.flashcard_id = f.id
            WHERE f.note_id = :uuid AND f.user_id = :owner
            ORDER BY f.created_at ASC
            -> idx_flashcards_note_created, idx_flashcard_reviews_flashcard

        Raises:
            DatabaseError: Query execution failed
        """
        note_uuid = parse_identifier(note_id)
        if note_uuid is None:
            return None

        owner = owner_id()
        reviews = (
            select(
                FlashcardReview.flashcard_id.label("flashcard_id"),
                func.count().label("review_count"),
                func.max(FlashcardReview.created_at).label("last_reviewed"),
                func.avg(
                    case((FlashcardReview.difficulty == "easy", 1.0), else_=0.0)
                ).label("difficulty_average"),
            )
            .where(FlashcardReview.user_id == owner)
            .group_by(FlashcardReview.flashcard_id)
            .subquery()
        )

        try:
            result = await db.execute(
                select(
                    Flashcard,
                    func.coalesce(reviews.c.review_count, 0),
                    reviews.c.last_reviewed,
                    func.coalesce(reviews.c.difficulty_average, 0),
                )
                .outerjoin(reviews, reviews.c.flashcard_id == Flashcard.id)
                .where(Flashcard.note_id == note_uuid, Flashcard.user_id == owner)
                .order_by(Flashcard.created_at.asc())
            )
            rows = result.all()
        except Exception as e:
            logger.error("Database error fetching flashcards for note %s: %s", note_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve flashcards: {type(e).__name__}",
                context={"note_id": str(note_uuid)},
            ) from e

        cards = [FlashcardResponse.from_row(*row) for row in rows]
        return FlashcardList(flashcards=cards, count=len(cards))


# ── Singleton Instance ────────────────────────────────────────────────────
flashcard_service = FlashcardService()
