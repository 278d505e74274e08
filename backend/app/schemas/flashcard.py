"""
MangoNote Backend - Flashcard Schemas
=======================================

What:  Payload of GET /api/flashcards/{note_id}: the cards of a note with
       their review statistics, plus a count.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class FlashcardResponse(BaseModel):
    """One card and how it has been reviewed so far."""

    id: uuid.UUID
    note_id: uuid.UUID
    user_id: uuid.UUID
    question: str
    answer: str
    created_at: datetime
    review_count: int = Field(default=0, description="Number of reviews by the owner")
    last_reviewed: Optional[datetime] = Field(default=None, description="Most recent review")
    difficulty_average: float = Field(
        default=0.0,
        description="Share of reviews marked easy (0.0 - 1.0)",
    )

    @classmethod
    def from_row(cls, card, review_count, last_reviewed, difficulty_average) -> "FlashcardResponse":
        return cls(
            id=card.id,
            note_id=card.note_id,
            user_id=card.user_id,
            question=card.question,
            answer=card.answer,
            created_at=card.created_at,
            review_count=review_count or 0,
            last_reviewed=last_reviewed,
            difficulty_average=float(difficulty_average or 0),
        )


class FlashcardList(BaseModel):
    flashcards: List[FlashcardResponse]
    count: int
