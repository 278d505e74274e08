"""
MangoNote Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the whole suite.
How:   No test talks to PostgreSQL: services get a mocked AsyncSession, and
       the HTTP client overrides the session dependency. Route tests patch
       the service singletons where the routes import them.

Fixtures:
    mock_db_session:  AsyncMock standing in for AsyncSession
    make_result:      builds the object `session.execute()` resolves to
    owner_uuid:       UUID every read is scoped to
    note_row:         a Note ORM instance with every column set
    mind_map_row:     a MindMap ORM instance with a small graph
    test_client:      httpx AsyncClient bound to the app via ASGITransport
"""

import os

# Settings are read when app modules are imported; set the environment first.
# The database URL is never connected to.
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DEFAULT_USER_ID"] = "550e8400-e29b-41d4-a716-446655440000"

import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import get_db_session
from app.models.mind_map import MindMap
from app.models.note import Note

OWNER_ID = uuid.UUID("550e8400-e29b-41d4-a716-446655440000")


def make_result(scalar=None, rows=None):
    """
    Build what `await session.execute(...)` returns.

    Supports the three access patterns the services use:
    scalar_one_or_none(), scalars().first() and scalars().all().
    """
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar
    scalars = MagicMock()
    scalars.first.return_value = scalar if rows is None else (rows[0] if rows else None)
    scalars.all.return_value = rows if rows is not None else ([scalar] if scalar else [])
    result.scalars.return_value = scalars
    return result


@pytest.fixture
def mock_db_session():
    """
    A mock async database session.

    Usage:
        mock_db_session.execute.return_value = make_result(scalar=note_row)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture(name="make_result")
def make_result_fixture():
    return make_result


@pytest.fixture
def owner_uuid():
    return OWNER_ID


@pytest.fixture
def note_row():
    """A completed note owned by the configured owner."""
    now = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
    return Note(
        id=uuid.uuid4(),
        user_id=OWNER_ID,
        folder_id=None,
        title="Photosynthesis",
        source_type="pdf",
        content_status="completed",
        markdown="# Photosynthesis\n\nLight becomes chemical energy.",
        transcription="Plants convert light energy into chemical energy stored in glucose.",
        url=None,
        image_url=None,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mind_map_row(note_row):
    """A two-node mind map built from `note_row`."""
    now = datetime(2024, 1, 15, 12, 5, tzinfo=timezone.utc)
    return MindMap(
        id=uuid.uuid4(),
        note_id=note_row.id,
        user_id=OWNER_ID,
        title="Photosynthesis map",
        description="Key ideas",
        nodes=[
            {
                "id": "root",
                "type": "root",
                "data": {"label": "Photosynthesis", "color": "#f59e0b", "importance": 5},
                "position": {"x": 0, "y": 0},
            },
            {
                "id": "n1",
                "type": "concept",
                "data": {"label": "Chlorophyll", "color": "#10b981", "importance": 3},
                "position": {"x": 120, "y": 40},
                "style": {"backgroundColor": "#ecfdf5", "fontWeight": "bold"},
            },
        ],
        edges=[
            {
                "id": "e1",
                "source": "root",
                "target": "n1",
                "type": "smoothstep",
                "data": {"relationship": "part-of", "strength": 4},
            },
        ],
        layout="radial",
        theme="default",
        map_metadata={
            "total_nodes": 2,
            "total_edges": 1,
            "max_depth": 1,
            "created_by": "ai",
            "version": 1,
        },
        created_by="ai",
        created_at=now,
        updated_at=now,
    )


@pytest_asyncio.fixture
async def test_client(mock_db_session):
    """
    Async HTTP client talking to the app in-process.

    The session dependency yields `mock_db_session`, so no connection is
    ever opened.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
    """
    from app.main import app

    async def _override_session():
        yield mock_db_session

    app.dependency_overrides[get_db_session] = _override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
