"""
MangoNote Backend - Note Service Unit Tests
=============================================

What:  Tests for NoteService lookups (single note, recent notes).
How:   Mocked AsyncSession; rows are real Note instances, never persisted.

What we test:
    ✅ Existing note is returned as NoteResponse
    ✅ Missing note and non-UUID identifiers return None
    ✅ Non-UUID identifiers never reach the database
    ✅ Driver failures surface as DatabaseError without the raw message
    ✅ Recent notes carry a 200 character preview or the empty placeholder
"""

import uuid

import pytest
from unittest.mock import AsyncMock

from app.exceptions import DatabaseError
from app.schemas.note import EMPTY_PREVIEW, PREVIEW_LENGTH, NoteResponse
from app.services.note_service import NoteService


class TestGetNoteById:
    """Tests for get_note_by_id."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_existing_note_returned(self, mock_db_session, make_result, note_row):
        """A matching row should come back as a NoteResponse."""
        mock_db_session.execute.return_value = make_result(scalar=note_row)

        result = await self.service.get_note_by_id(mock_db_session, str(note_row.id))

        assert isinstance(result, NoteResponse)
        assert result.id == note_row.id
        assert result.title == "Photosynthesis"
        assert result.content_status == "completed"
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_note_returns_none(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result(scalar=None)

        result = await self.service.get_note_by_id(mock_db_session, str(uuid.uuid4()))

        assert result is None

    @pytest.mark.asyncio
    async def test_non_uuid_identifier_skips_query(self, mock_db_session):
        """Identifiers like 'ghost' cannot match a row, so no query is issued."""
        result = await self.service.get_note_by_id(mock_db_session, "ghost")

        assert result is None
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_identifier_is_trimmed(self, mock_db_session, make_result, note_row):
        mock_db_session.execute.return_value = make_result(scalar=note_row)

        result = await self.service.get_note_by_id(mock_db_session, f"  {note_row.id}  ")

        assert result is not None
        assert result.id == note_row.id

    @pytest.mark.asyncio
    async def test_query_failure_raises_database_error(self, mock_db_session):
        """Driver errors are wrapped; the original stays chained for the logs."""
        note_id = uuid.uuid4()
        mock_db_session.execute = AsyncMock(side_effect=OSError("connection refused"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_note_by_id(mock_db_session, str(note_id))

        error = exc_info.value
        assert error.code == "DATABASE_ERROR"
        assert error.retryable is True
        assert error.context == {"note_id": str(note_id)}
        assert "connection refused" not in error.user_message
        assert isinstance(error.__cause__, OSError)


class TestGetRecentNotes:
    """Tests for get_recent_notes."""

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_returns_summaries_with_preview(self, mock_db_session, make_result, note_row):
        mock_db_session.execute.return_value = make_result(rows=[note_row])

        result = await self.service.get_recent_notes(mock_db_session, limit=6)

        assert len(result) == 1
        assert result[0].id == note_row.id
        assert result[0].preview == note_row.transcription

    @pytest.mark.asyncio
    async def test_long_transcription_is_truncated(self, mock_db_session, make_result, note_row):
        note_row.transcription = "x" * 500
        mock_db_session.execute.return_value = make_result(rows=[note_row])

        result = await self.service.get_recent_notes(mock_db_session)

        assert len(result[0].preview) == PREVIEW_LENGTH

    @pytest.mark.asyncio
    async def test_missing_transcription_uses_placeholder(self, mock_db_session, make_result, note_row):
        note_row.transcription = None
        mock_db_session.execute.return_value = make_result(rows=[note_row])

        result = await self.service.get_recent_notes(mock_db_session)

        assert result[0].preview == EMPTY_PREVIEW

    @pytest.mark.asyncio
    async def test_no_notes_returns_empty_list(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result(rows=[])

        assert await self.service.get_recent_notes(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_query_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("db down"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.get_recent_notes(mock_db_session, limit=3)

        assert exc_info.value.context == {"limit": 3}
