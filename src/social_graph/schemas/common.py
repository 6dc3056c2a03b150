"""Shared envelopes: rate-limit snapshots, response wrappers and cursored pages."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from social_graph.schemas.user import TwitterUser

T = TypeVar("T")
U = TypeVar("U")

NO_CURSOR = 0


@dataclass(frozen=True)
class RateLimit:
    """Rate-limit counters reported with a response; -1 when not reported."""

    limit: int = -1
    remaining: int = -1
    reset: int = -1


@dataclass(frozen=True)
class Response(Generic[T]):
    """A decoded item together with the rate-limit snapshot of its request."""

    rate_limit: RateLimit
    response: T

    def map(self, func: Callable[[T], U]) -> Response[U]:
        """Transform the payload while keeping the rate-limit snapshot."""
        return Response(rate_limit=self.rate_limit, response=func(self.response))


@dataclass(frozen=True)
class Page(Generic[T]):
    """One fetch of a cursored listing."""

    items: list[T]
    previous_cursor: int = NO_CURSOR
    next_cursor: int = NO_CURSOR
    rate_limit: RateLimit = field(default_factory=RateLimit)

    @property
    def is_last(self) -> bool:
        return self.next_cursor == NO_CURSOR


class Cursor(BaseModel):
    """Cursor fields shared by every cursored listing envelope."""

    previous_cursor: int = Field(..., description="Cursor of the preceding page; 0 at start.")
    next_cursor: int = Field(..., description="Cursor of the following page; 0 at end.")

    model_config = ConfigDict(extra="ignore")


class UserCursor(Cursor):
    """Page envelope of a listing that returns full user records."""

    users: list[TwitterUser]

    @property
    def items(self) -> list[TwitterUser]:
        return self.users


class IDCursor(Cursor):
    """Page envelope of a listing that returns bare numeric IDs."""

    ids: list[int]

    @property
    def items(self) -> list[int]:
        return self.ids
