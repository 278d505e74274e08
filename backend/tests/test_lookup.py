"""
MangoNote Backend - Lookup Helper Unit Tests
==============================================

What:  Tests for lookup_and_respond() without HTTP routing in between.
How:   The lookup is an AsyncMock; responses are inspected directly.

Blank identifiers cannot be produced through path routing for every case
(an empty segment never matches the route), so the 400 branch is covered here.
"""

import json
import logging

import pytest
from unittest.mock import AsyncMock

from app.error_handler import GENERIC_ERROR_MESSAGE
from app.routes.lookup import lookup_and_respond
from app.schemas.common import ApiResponse

MESSAGES = dict(
    context="note_fetch",
    id_field="note_id",
    missing_id_message="Note ID is required",
    not_found_message="Note not found",
)


def _body(response):
    return json.loads(response.body)


class TestLookupAndRespond:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity_id", ["", "   ", None])
    async def test_blank_identifier_is_400_without_lookup(self, entity_id):
        lookup = AsyncMock()

        response = await lookup_and_respond(entity_id, lookup, **MESSAGES)

        assert response.status_code == 400
        assert _body(response) == {"success": False, "error": "Note ID is required"}
        lookup.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_found_entity_is_wrapped(self):
        lookup = AsyncMock(return_value={"id": "abc123"})

        response = await lookup_and_respond("abc123", lookup, **MESSAGES)

        assert isinstance(response, ApiResponse)
        assert response.success is True
        assert response.data == {"id": "abc123"}
        lookup.assert_awaited_once_with("abc123")

    @pytest.mark.asyncio
    async def test_missing_entity_is_404(self):
        lookup = AsyncMock(return_value=None)

        response = await lookup_and_respond("ghost", lookup, **MESSAGES)

        assert response.status_code == 404
        assert _body(response) == {"success": False, "error": "Note not found"}

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_sanitized(self, caplog):
        lookup = AsyncMock(side_effect=Exception("db down"))

        with caplog.at_level(logging.ERROR, logger="app.error_handler"):
            response = await lookup_and_respond("abc123", lookup, **MESSAGES)

        body = _body(response)
        assert response.status_code == 500
        assert body["success"] is False
        assert body["error"] == GENERIC_ERROR_MESSAGE
        assert "db down" not in response.body.decode()

        record = caplog.records[0]
        assert record.error_context == "note_fetch"
        assert record.error_metadata == {"note_id": "abc123"}
