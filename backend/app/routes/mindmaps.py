"""
MangoNote Backend - Mind Map Route Handlers
=============================================

What:  Read and edit mind maps attached to notes.
How:   Every handler funnels through lookup_and_respond(), so the
       400 / 404 / 500 behavior is identical across endpoints.

Route Inventory:
    GET  /api/mindmaps/note/{note_id}   newest mind map built from a note
    GET  /api/mindmaps/{mind_map_id}    mind map by its own id
    PUT  /api/mindmaps/{mind_map_id}    partial update (title, graph, layout, ...)

Failure context tags: mindmap_get_by_note, mindmap_get, mindmap_update.
"""


from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.lookup import lookup_and_respond
from app.schemas.common import ApiResponse, ErrorResponse
from app.schemas.mind_map import MindMapResponse, MindMapUpdate
from app.services.mindmap_service import mindmap_service


router = APIRouter(prefix="/api/mindmaps", tags=["Mind Maps"])

_ERROR_RESPONSES = {
    400: {"description": "Missing identifier", "model": ErrorResponse},
    404: {"description": "Mind map not found", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


@router.get(
    "/note/{note_id}",
    response_model=ApiResponse[MindMapResponse],
    responses=_ERROR_RESPONSES,
    summary="Get the mind map of a note",
)
async def get_mind_map_by_note(
    note_id: str,
    db: AsyncSession = Depends(get_db_session),
):
    """Newest mind map generated for the note; 404 if the note has none."""
    return await lookup_and_respond(
        note_id,
        lambda entity_id: mindmap_service.get_mind_map_by_note_id(db, entity_id),
        context="mindmap_get_by_note",
        id_field="note_id",
        missing_id_message="Note ID is required",
        not_found_message="Mind map not found for this note",
    )


@router.get(
    "/{mind_map_id}",
    response_model=ApiResponse[MindMapResponse],
    responses=_ERROR_RESPONSES,
    summary="Get a mind map by ID",
)
async def get_mind_map(
    mind_map_id: str,
    db: AsyncSession = Depends(get_db_session),
):
    return await lookup_and_respond(
        mind_map_id,
        lambda entity_id: mindmap_service.get_mind_map_by_id(db, entity_id),
        context="mindmap_get",
        id_field="mind_map_id",
        missing_id_message="Mind map ID is required",
        not_found_message="Mind map not found",
    )


@router.put(
    "/{mind_map_id}",
    response_model=ApiResponse[MindMapResponse],
    responses=_ERROR_RESPONSES,
    summary="Update a mind map",
    description=(
        "Partially updates a mind map. Omitted fields keep their stored value. "
        "Replacing nodes or edges refreshes the node/edge totals and bumps the version."
    ),
)
async def update_mind_map(
    mind_map_id: str,
    updates: MindMapUpdate,
    db: AsyncSession = Depends(get_db_session),
):
    return await lookup_and_respond(
        mind_map_id,
        lambda entity_id: mindmap_service.update_mind_map(db, entity_id, updates),
        context="mindmap_update",
        id_field="mind_map_id",
        missing_id_message="Mind map ID is required",
        not_found_message="Mind map not found or update failed",
    )
