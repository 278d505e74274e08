"""
MangoNote Backend - Flashcard Route Handlers
==============================================

What:  GET /api/flashcards/{note_id}: the study cards generated from a note.
How:   Same lookup_and_respond() path as notes and mind maps; a note without
       cards answers 200 with an empty list.

Failure context tag: flashcards_get.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.lookup import lookup_and_respond
from app.schemas.common import ApiResponse, ErrorResponse
from app.schemas.flashcard import FlashcardList
from app.services.flashcard_service import flashcard_service

router = APIRouter(prefix="/api/flashcards", tags=["Flashcards"])


@router.get(
    "/{note_id}",
    response_model=ApiResponse[FlashcardList],
    responses={
        400: {"description": "Missing note ID", "model": ErrorResponse},
        404: {"description": "Identifier cannot match a note", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Flashcards of a note",
)
async def get_flashcards(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
):
    return await lookup_and_respond(
        note_id,
        lambda entity_id: flashcard_service.get_flashcards_by_note_id(db, entity_id),
        context="flashcards_get",
        id_field="note_id",
        missing_id_message="Note ID is required",
        not_found_message="Flashcards not found for this note",
    )
