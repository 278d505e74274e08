"""
MangoNote Backend - Flashcard Service Unit Tests
==================================================

What:  Tests for FlashcardService.get_flashcards_by_note_id.
How:   Mocked AsyncSession; `result.all()` yields (card, count, last, avg) rows.

What we test:
    ✅ Cards come back with review statistics and a count
    ✅ Cards never reviewed get zero statistics
    ✅ A note without cards is an empty list, not None
    ✅ Non-UUID identifiers return None without querying
    ✅ Query failures raise DatabaseError
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.exceptions import DatabaseError
from app.models.flashcard import Flashcard
from app.services.flashcard_service import FlashcardService


def _rows_result(rows):
    result = MagicMock()
    result.all.return_value = rows
    return result


@pytest.fixture
def flashcard_row(note_row):
    return Flashcard(
        id=uuid.uuid4(),
        note_id=note_row.id,
        user_id=note_row.user_id,
        question="What does photosynthesis produce?",
        answer="Glucose and oxygen",
        created_at=datetime(2024, 1, 16, 9, 0, tzinfo=timezone.utc),
    )


class TestGetFlashcardsByNoteId:

    def setup_method(self):
        self.service = FlashcardService()

    @pytest.mark.asyncio
    async def test_cards_with_review_statistics(self, mock_db_session, note_row, flashcard_row):
        last = datetime(2024, 1, 20, 8, 30, tzinfo=timezone.utc)
        mock_db_session.execute.return_value = _rows_result(
            [(flashcard_row, 3, last, Decimal("0.6667"))]
        )

        result = await self.service.get_flashcards_by_note_id(mock_db_session, str(note_row.id))

        assert result.count == 1
        card = result.flashcards[0]
        assert card.id == flashcard_row.id
        assert card.answer == "Glucose and oxygen"
        assert card.review_count == 3
        assert card.last_reviewed == last
        assert card.difficulty_average == pytest.approx(0.6667)

    @pytest.mark.asyncio
    async def test_unreviewed_card(self, mock_db_session, note_row, flashcard_row):
        mock_db_session.execute.return_value = _rows_result([(flashcard_row, 0, None, 0)])

        result = await self.service.get_flashcards_by_note_id(mock_db_session, str(note_row.id))

        card = result.flashcards[0]
        assert card.review_count == 0
        assert card.last_reviewed is None
        assert card.difficulty_average == 0.0

    @pytest.mark.asyncio
    async def test_note_without_cards(self, mock_db_session, note_row):
        mock_db_session.execute.return_value = _rows_result([])

        result = await self.service.get_flashcards_by_note_id(mock_db_session, str(note_row.id))

        assert result is not None
        assert result.count == 0
        assert result.flashcards == []

    @pytest.mark.asyncio
    async def test_non_uuid_identifier_skips_query(self, mock_db_session):
        assert await self.service.get_flashcards_by_note_id(mock_db_session, "ghost") is None
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_query_failure_raises_database_error(self, mock_db_session):
        note_id = uuid.uuid4()
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("db down"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_flashcards_by_note_id(mock_db_session, str(note_id))

        assert exc_info.value.context == {"note_id": str(note_id)}
