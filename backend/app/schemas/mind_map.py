"""
MangoNote Backend - Mind Map Schemas
======================================

What:  Pydantic models for mind map graphs and partial updates.
How:   Node/edge shapes follow the graph renderer on the frontend
       (id, type, data, position, style).
Who:   MindMapService builds MindMapResponse; PUT /api/mindmaps/{id} accepts
       MindMapUpdate.

Two sets of graph models:
    - Read side (MindMapNode, MindMapEdge, ...): stored JSONB is returned as
      written. Generated maps carry whatever the generator produced
      (free-form relationship names, fractional importance, extra keys), so
      these models only require the keys the renderer cannot do without.
    - Write side (MindMapNodeIn, MindMapEdgeIn, ...): PUT bodies are checked
      against the closed vocabularies and the 1-5 importance/strength scale.
"""

import uuid
from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

NodeType = Literal["root", "concept", "detail", "connection", "example"]
EdgeType = Literal["default", "smoothstep", "straight", "step"]
Relationship = Literal["causes", "leads-to", "part-of", "example-of", "related-to"]
Layout = Literal["hierarchical", "radial", "force", "manual"]
Theme = Literal["default", "academic", "creative", "technical"]
CreatedBy = Literal["ai", "user", "hybrid"]

# int stays int on the wire, 3.5 stays 3.5
Number = Union[int, float]


# ══════════════════════════════════════════════════════════════════════════
# Graph Items (read side)
# ══════════════════════════════════════════════════════════════════════════


class NodePosition(BaseModel):
    x: float
    y: float


class NodeData(BaseModel):
    model_config = ConfigDict(extra="allow")

    label: str
    description: Optional[str] = None
    color: Optional[str] = None
    importance: Optional[Number] = None
    category: Optional[str] = None
    examples: Optional[List[str]] = None
    keywords: Optional[List[str]] = None


class NodeStyle(BaseModel):
    # Renderer style keys are camelCase on the wire
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    background_color: Optional[str] = Field(default=None, alias="backgroundColor")
    border_color: Optional[str] = Field(default=None, alias="borderColor")
    border_width: Optional[float] = Field(default=None, alias="borderWidth")
    font_size: Optional[float] = Field(default=None, alias="fontSize")
    font_weight: Optional[str] = Field(default=None, alias="fontWeight")
    width: Optional[float] = None
    height: Optional[float] = None


class MindMapNode(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    type: Optional[str] = None
    data: NodeData
    position: NodePosition
    style: Optional[NodeStyle] = None


class EdgeStyle(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    stroke_width: Optional[float] = Field(default=None, alias="strokeWidth")
    stroke: Optional[str] = None
    stroke_dasharray: Optional[str] = Field(default=None, alias="strokeDasharray")


class EdgeData(BaseModel):
    model_config = ConfigDict(extra="allow")

    relationship: Optional[str] = None
    strength: Optional[Number] = None


class MindMapEdge(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    source: str
    target: str
    type: Optional[str] = None
    animated: Optional[bool] = None
    label: Optional[str] = None
    style: Optional[EdgeStyle] = None
    data: Optional[EdgeData] = None


class MindMapMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_nodes: int = 0
    total_edges: int = 0
    max_depth: int = 0
    created_by: str = "ai"
    version: int = 1


# ══════════════════════════════════════════════════════════════════════════
# Graph Items (write side)
# ══════════════════════════════════════════════════════════════════════════


class NodeDataIn(NodeData):
    model_config = ConfigDict(extra="forbid")

    color: str
    importance: int = Field(ge=1, le=5)


class NodeStyleIn(NodeStyle):
    model_config = ConfigDict(extra="forbid")

    font_weight: Optional[Literal["normal", "bold"]] = Field(default=None, alias="fontWeight")


class MindMapNodeIn(MindMapNode):
    model_config = ConfigDict(extra="forbid")

    type: NodeType
    data: NodeDataIn
    style: Optional[NodeStyleIn] = None


class EdgeDataIn(EdgeData):
    model_config = ConfigDict(extra="forbid")

    relationship: Relationship
    strength: int = Field(ge=1, le=5)


class MindMapEdgeIn(MindMapEdge):
    model_config = ConfigDict(extra="forbid")

    type: Optional[EdgeType] = None
    data: Optional[EdgeDataIn] = None


class MindMapMetadataIn(MindMapMetadata):
    model_config = ConfigDict(extra="forbid")

    total_nodes: int = Field(default=0, ge=0)
    total_edges: int = Field(default=0, ge=0)
    max_depth: int = Field(default=0, ge=0)
    created_by: CreatedBy = "ai"
    version: int = Field(default=1, ge=1)


# ══════════════════════════════════════════════════════════════════════════
# Response / Request Models
# ══════════════════════════════════════════════════════════════════════════


class MindMapResponse(BaseModel):
    """
    Full mind map, returned by GET /api/mindmaps/{id},
    GET /api/mindmaps/note/{note_id} and PUT /api/mindmaps/{id}.
    """

    id: uuid.UUID
    note_id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: Optional[str] = None
    nodes: List[MindMapNode]
    edges: List[MindMapEdge]
    layout: str
    theme: str
    metadata: MindMapMetadata
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, mind_map) -> "MindMapResponse":
        """Build from an ORM row; `metadata` lives on `map_metadata` there."""
        return cls(
            id=mind_map.id,
            note_id=mind_map.note_id,
            user_id=mind_map.user_id,
            title=mind_map.title,
            description=mind_map.description,
            nodes=mind_map.nodes or [],
            edges=mind_map.edges or [],
            layout=mind_map.layout,
            theme=mind_map.theme,
            metadata=mind_map.map_metadata or {},
            created_at=mind_map.created_at,
            updated_at=mind_map.updated_at,
        )


class MindMapUpdate(BaseModel):
    """
    Partial update body for PUT /api/mindmaps/{id}.

    Omitted (or null) fields keep their stored value.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    nodes: Optional[List[MindMapNodeIn]] = None
    edges: Optional[List[MindMapEdgeIn]] = None
    layout: Optional[Layout] = None
    theme: Optional[Theme] = None
    metadata: Optional[MindMapMetadataIn] = None
