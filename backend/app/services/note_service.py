"""
MangoNote Backend - Note Service
==================================

What:  Read access to notes for the owner configured in settings.
How:   Async SQLAlchemy queries against the `notes` table; rows are converted
       to response schemas before leaving the service.
Who:   Called by the note route handlers.

Return conventions:
    - A lookup that matches nothing returns None (the route answers 404)
    - Any database failure is logged and re-raised as DatabaseError, which
      carries only safe context (the route answers 500)

NoteService is stateless; the session is passed in for each call.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.note import Note
from app.schemas.note import NoteResponse, NoteSummary
from app.services.identifiers import owner_id, parse_identifier

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note reads.

    Responsibilities:
        - get_note_by_id(): single note for the detail page
        - get_recent_notes(): newest completed notes for the dashboard
    """

    async def get_note_by_id(self, db: AsyncSession, note_id: str) -> Optional[NoteResponse]:
        """
        Retrieve a single note by ID.

        Query plan:
            SELECT * FROM notes WHERE id = :uuid AND user_id = :owner
            -> primary key lookup

        Args:
            db: Async database session
            note_id: Identifier from the request path (any string)

        Returns:
            NoteResponse, or None when no note of this owner has that id

        Raises:
            DatabaseError: Query execution failed
        """
        note_uuid = parse_identifier(note_id)
        if note_uuid is None:
            logger.debug("Note id %r is not a UUID; treating as not found", note_id)
            return None

        try:
            result = await db.execute(
                select(Note).where(Note.id == note_uuid, Note.user_id == owner_id())
            )
            note = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve note: {type(e).__name__}",
                context={"note_id": str(note_uuid)},
            ) from e

        if note is None:
            return None
        return NoteResponse.model_validate(note)

    async def get_recent_notes(self, db: AsyncSession, limit: int = 6) -> List[NoteSummary]:
        """
        Newest completed notes of the owner, most recently updated first.

        Query plan:
            SELECT * FROM notes
            WHERE user_id = :owner AND content_status = 'completed'
            ORDER BY updated_at DESC LIMIT :limit
            -> idx_notes_user_updated

        Raises:
            DatabaseError: Query execution failed
        """
        try:
            result = await db.execute(
                select(Note)
                .where(Note.user_id == owner_id(), Note.content_status == "completed")
                .order_by(desc(Note.updated_at))
                .limit(limit)
            )
            notes = list(result.scalars().all())
        except Exception as e:
            logger.error("Database error listing recent notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=f"Could not list recent notes: {type(e).__name__}",
                context={"limit": limit},
            ) from e

        return [NoteSummary.from_note(note) for note in notes]


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
