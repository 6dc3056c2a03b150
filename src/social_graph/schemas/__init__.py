"""Wire models and response envelopes."""

from .common import NO_CURSOR, Cursor, IDCursor, Page, RateLimit, Response, UserCursor
from .user import (
    Connection,
    RelationLookup,
    Relationship,
    RelationSource,
    RelationTarget,
    TwitterUser,
)

__all__ = [
    "NO_CURSOR",
    "Connection",
    "Cursor",
    "IDCursor",
    "Page",
    "RateLimit",
    "RelationLookup",
    "RelationSource",
    "RelationTarget",
    "Relationship",
    "Response",
    "TwitterUser",
    "UserCursor",
]
