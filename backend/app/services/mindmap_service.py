"""
MangoNote Backend - Mind Map Service
======================================

What:  Lookup and partial update of mind maps attached to notes.
How:   Async SQLAlchemy against the `mind_maps` table; JSONB columns are
       validated into MindMapResponse on the way out.
Who:   Called by the mind map route handlers.

Return conventions match NoteService: None for "no such mind map",
DatabaseError for any failure while talking to the database.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.mind_map import MindMap
from app.schemas.mind_map import MindMapMetadata, MindMapResponse, MindMapUpdate
from app.services.identifiers import owner_id, parse_identifier

logger = logging.getLogger(__name__)


class MindMapService:
    """
    Business logic layer for mind maps.

    Responsibilities:
        - get_mind_map_by_note_id(): newest map built from a note
        - get_mind_map_by_id(): a map by its own id
        - update_mind_map(): partial update with metadata bookkeeping
    """

    async def get_mind_map_by_note_id(
        self, db: AsyncSession, note_id: str
    ) -> Optional[MindMapResponse]:
        """
        Newest mind map of the owner for a note.

        Query plan:
            SELECT * FROM mind_maps WHERE note_id = :uuid AND user_id = :owner
            ORDER BY created_at DESC LIMIT 1
            -> idx_mind_maps_note_created

        Raises:
            DatabaseError: Query execution failed
        """
        note_uuid = parse_identifier(note_id)
        if note_uuid is None:
            return None

        try:
            result = await db.execute(
                select(MindMap)
                .where(MindMap.note_id == note_uuid, MindMap.user_id == owner_id())
                .order_by(desc(MindMap.created_at))
                .limit(1)
            )
            mind_map = result.scalars().first()
        except Exception as e:
            logger.error("Database error fetching mind map for note %s: %s", note_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve mind map: {type(e).__name__}",
                context={"note_id": str(note_uuid)},
            ) from e

        if mind_map is None:
            return None
        return MindMapResponse.from_model(mind_map)

    async def get_mind_map_by_id(
        self, db: AsyncSession, mind_map_id: str
    ) -> Optional[MindMapResponse]:
        """Mind map by its own id, or None."""
        mind_map = await self._load(db, mind_map_id)
        if mind_map is None:
            return None
        return MindMapResponse.from_model(mind_map)

    async def update_mind_map(
        self, db: AsyncSession, mind_map_id: str, updates: MindMapUpdate
    ) -> Optional[MindMapResponse]:
        """
        Apply a partial update to a mind map.

        Behavior:
            - Fields that are None in `updates` keep their stored value
            - metadata.total_nodes / total_edges are always recounted from
              the graph as stored after the update
            - metadata.version is max(stored, supplied), plus one when nodes
              or edges are replaced; it never decreases
            - An explicit metadata object supplies the remaining fields
              (max_depth, created_by)

        Returns:
            The updated MindMapResponse, or None when no such mind map exists

        Raises:
            DatabaseError: Query or flush failed
        """
        mind_map = await self._load(db, mind_map_id)
        if mind_map is None:
            return None

        stored_metadata = MindMapMetadata.model_validate(mind_map.map_metadata or {})

        if updates.title is not None:
            mind_map.title = updates.title
        if updates.description is not None:
            mind_map.description = updates.description
        if updates.layout is not None:
            mind_map.layout = updates.layout
        if updates.theme is not None:
            mind_map.theme = updates.theme

        graph_changed = updates.nodes is not None or updates.edges is not None
        # JSONB columns are replaced wholesale so the change is tracked
        if updates.nodes is not None:
            mind_map.nodes = [_dump(node) for node in updates.nodes]
        if updates.edges is not None:
            mind_map.edges = [_dump(edge) for edge in updates.edges]

        # Totals always describe the stored graph; the version never goes back
        supplied = updates.metadata or stored_metadata
        version = max(stored_metadata.version, supplied.version)
        if graph_changed:
            version += 1
        metadata = MindMapMetadata.model_validate(
            {
                **supplied.model_dump(),
                "total_nodes": len(mind_map.nodes or []),
                "total_edges": len(mind_map.edges or []),
                "version": version,
            }
        )
        mind_map.map_metadata = metadata.model_dump(mode="json")
        mind_map.created_by = metadata.created_by
        mind_map.updated_at = datetime.now(timezone.utc)

        try:
            await db.flush()
        except Exception as e:
            logger.error("Database error updating mind map %s: %s", mind_map_id, str(e))
            raise DatabaseError(
                message=f"Could not update mind map: {type(e).__name__}",
                context={"mind_map_id": str(mind_map.id)},
            ) from e

        logger.info(
            "Mind map %s updated (version=%d, nodes=%d, edges=%d)",
            mind_map.id,
            metadata.version,
            metadata.total_nodes,
            metadata.total_edges,
        )
        return MindMapResponse.from_model(mind_map)

    async def _load(self, db: AsyncSession, mind_map_id: str) -> Optional[MindMap]:
        map_uuid = parse_identifier(mind_map_id)
        if map_uuid is None:
            return None

        try:
            result = await db.execute(
                select(MindMap).where(MindMap.id == map_uuid, MindMap.user_id == owner_id())
            )
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching mind map %s: %s", mind_map_id, str(e))
            raise DatabaseError(
                message=f"Could not retrieve mind map: {type(e).__name__}",
                context={"mind_map_id": str(map_uuid)},
            ) from e


def _dump(item) -> Dict[str, Any]:
    """Serialize a node or edge the way the renderer stores it (camelCase, no nulls)."""
    return item.model_dump(mode="json", by_alias=True, exclude_none=True)


# ── Singleton Instance ────────────────────────────────────────────────────
mindmap_service = MindMapService()
