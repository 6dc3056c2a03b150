"""Client for the user and social-graph endpoints of a remote social service."""

from social_graph.account import ScreenName, UserID, as_account
from social_graph.auth import BearerCredentials, Credentials, Token
from social_graph.cursor import CursorIterator, PageFetcher, SearchIterator
from social_graph.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    GraphError,
    StalledCursorError,
    TransportError,
)
from social_graph.schemas import Page, RateLimit, Response, TwitterUser
from social_graph.transport import Transport, get_transport

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "BearerCredentials",
    "ConfigurationError",
    "Credentials",
    "CursorIterator",
    "DecodeError",
    "GraphError",
    "Page",
    "PageFetcher",
    "RateLimit",
    "Response",
    "ScreenName",
    "SearchIterator",
    "StalledCursorError",
    "Token",
    "Transport",
    "TransportError",
    "TwitterUser",
    "UserID",
    "as_account",
    "get_transport",
]
