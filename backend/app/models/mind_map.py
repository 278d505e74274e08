"""
MangoNote Backend - MindMap SQLAlchemy Model
==============================================

What:  ORM model representing the `mind_maps` table.
How:   Graph structure (nodes, edges) and its bookkeeping (metadata) are stored
       as JSONB documents in the shape the frontend's graph renderer consumes.
Who:   Used by MindMapService for lookups and updates.

Table Design:
    - note_id: the note the map was built from (cascade delete with the note)
    - nodes / edges: JSONB arrays, see app/schemas/mind_map.py for the item shape
    - metadata: JSONB object {total_nodes, total_edges, max_depth, created_by, version}
    - A note may have several maps over time; lookups by note return the newest.

    Index on (note_id, created_at DESC):
        Serves "latest mind map for this note".
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy import ForeignKey, Index, String, Text, text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MindMap(Base):
    """A concept graph attached to a note."""

    __tablename__ = "mind_maps"

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

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ── Graph ─────────────────────────────────────────────────────────────
    nodes: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
    )
    edges: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSONB,
        nullable=False,
        default=list,
        server_default=text("'[]'::jsonb"),
    )

    # Values: hierarchical, radial, force, manual
    layout: Mapped[str] = mapped_column(
        String(20), nullable=False, default="radial", server_default=text("'radial'")
    )
    # Values: default, academic, creative, technical
    theme: Mapped[str] = mapped_column(
        String(20), nullable=False, default="default", server_default=text("'default'")
    )

    # `metadata` is reserved on declarative classes; the column keeps the name
    map_metadata: Mapped[Dict[str, Any]] = mapped_column(
        "metadata",
        JSONB,
        nullable=False,
        default=dict,
        server_default=text("'{}'::jsonb"),
    )
    # Values: ai, user, hybrid
    created_by: Mapped[str] = mapped_column(
        String(20), nullable=False, default="ai", server_default=text("'ai'")
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_mind_maps_note_created", note_id, created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<MindMap(id={self.id}, note_id={self.note_id}, title='{self.title}')>"
