"""Identifier parsing shared by the lookup services."""

import uuid
from typing import Optional

from app.config import settings


def parse_identifier(value: str) -> Optional[uuid.UUID]:
    """
    Parse a path identifier into a UUID.

    Returns None for anything that is not a UUID: such an identifier cannot
    match a row, so callers treat it as "not found" without querying.
    """
    try:
        return uuid.UUID(str(value).strip())
    except (ValueError, AttributeError):
        return None


def owner_id() -> uuid.UUID:
    """UUID of the owner every read is scoped to."""
    return uuid.UUID(settings.default_user_id)
