"""
MangoNote Backend - Note Schemas
==================================

What:  Pydantic models for note payloads returned inside the envelope.
How:   Built from ORM rows with `model_validate(note)` (from_attributes).
Who:   NoteService builds them; note routes wrap them in ApiResponse.

Schemas are separate from the SQLAlchemy models so the API contract can
change (computed fields like `preview`) without touching the table.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

PREVIEW_LENGTH = 200
EMPTY_PREVIEW = "No content available"


class NoteResponse(BaseModel):
    """Full representation of a note, returned by GET /api/notes/{id}."""

    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    user_id: uuid.UUID = Field(description="Owner of the note")
    folder_id: Optional[uuid.UUID] = Field(default=None, description="Folder the note is filed under")
    title: str = Field(description="Note title")
    source_type: str = Field(description="Origin: pdf, audio, text, youtube, import, recording, manual")
    content_status: str = Field(description="Processing state: draft, processing, completed, failed")
    markdown: Optional[str] = Field(default=None, description="Formatted note body")
    transcription: Optional[str] = Field(default=None, description="Extracted or transcribed text")
    url: Optional[str] = Field(default=None, description="Source URL (videos, web imports)")
    image_url: Optional[str] = Field(default=None, description="Cover or source image URL")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last changed (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class NoteSummary(BaseModel):
    """
    Compact note for dashboard cards, returned by GET /api/notes/recent.

    `preview` is the first 200 characters of the transcription, or
    "No content available" when there is none.
    """

    id: uuid.UUID
    title: str
    source_type: str
    content_status: str
    url: Optional[str] = None
    preview: str = Field(description="First 200 characters of the transcription")
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @classmethod
    def from_note(cls, note) -> "NoteSummary":
        preview = (note.transcription or "")[:PREVIEW_LENGTH]
        return cls(
            id=note.id,
            title=note.title,
            source_type=note.source_type,
            content_status=note.content_status,
            url=note.url,
            preview=preview or EMPTY_PREVIEW,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
