"""
MangoNote Backend - Notes Route Handlers
==========================================

What:  GET /api/notes/recent (dashboard list) and GET /api/notes/{note_id} (detail).
How:   Extracts parameters, delegates to NoteService, answers with the envelope.
Who:   Called by the frontend dashboard and note detail page.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.routes.lookup import lookup_and_respond, server_error
from app.schemas.common import ApiResponse, ErrorResponse
from app.schemas.note import NoteResponse, NoteSummary
from app.services.note_service import note_service


router = APIRouter(prefix="/api", tags=["Notes"])


# Declared before /notes/{note_id} so "recent" is not taken as an identifier
@router.get(
    "/notes/recent",
    response_model=ApiResponse[List[NoteSummary]],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Recently updated notes",
    description=(
        "Returns the most recently updated completed notes as compact summaries "
        "with a short text preview, newest first."
    ),
)
async def get_recent_notes(
    limit: Optional[int] = Query(
        default=None, ge=1, le=50,
        description="Number of notes to return (defaults to RECENT_NOTES_DEFAULT_LIMIT)",
    ),
    db: AsyncSession = Depends(get_db_session),
):
    effective_limit = limit or settings.recent_notes_default_limit
    try:
        notes = await note_service.get_recent_notes(db, limit=effective_limit)
    except Exception as error:
        return server_error(error, "recent_notes_fetch", {"limit": effective_limit})

    return ApiResponse(data=notes)


@router.get(
    "/notes/{note_id}",
    response_model=ApiResponse[NoteResponse],
    responses={
        400: {"description": "Missing note ID", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
):
    """
    Get full details of a single note.

    Error responses:
        400: identifier is blank
        404: no note with this identifier (including non-UUID identifiers)
        500: unexpected failure, logged with context "note_fetch"
    """
    return await lookup_and_respond(
        note_id,
        lambda entity_id: note_service.get_note_by_id(db, entity_id),
        context="note_fetch",
        id_field="note_id",
        missing_id_message="Note ID is required",
        not_found_message="Note not found",
    )
