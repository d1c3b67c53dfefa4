"""
Identifier parsing helpers.

Records are keyed by MongoDB ObjectIds, exposed to clients as 24-character
hex strings.
"""

from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId

from app.core.errors import MalformedIdentifierError


def parse_object_id(raw) -> Optional[ObjectId]:
    """Return the ObjectId for ``raw``, or None when it is malformed."""
    if isinstance(raw, ObjectId):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError):
        return None


def require_object_id(raw) -> ObjectId:
    """Like parse_object_id, but raises MalformedIdentifierError instead of returning None."""
    oid = parse_object_id(raw)
    if oid is None:
        raise MalformedIdentifierError(raw)
    return oid
