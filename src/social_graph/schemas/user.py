"""User-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CREATED_AT_FORMAT = "%a %b %d %H:%M:%S %z %Y"


class TwitterUser(BaseModel):
    """Profile information for a single account."""

    id: int = Field(..., description="Numeric account ID")
    screen_name: str = Field(..., description="Handle, without the leading @")
    name: str = Field(..., description="Display name")
    created_at: datetime | None = Field(None, description="Account creation time (UTC)")
    description: str | None = Field(None, description="Free-form profile biography")
    location: str | None = Field(None, description="Free-form profile location")
    url: str | None = Field(None, description="Profile link, usually shortened")
    lang: str | None = Field(None, description="Interface language (BCP 47)")
    time_zone: str | None = None
    utc_offset: int | None = None
    protected: bool = Field(False, description="True if the account's posts are private")
    verified: bool = False
    geo_enabled: bool = False
    contributors_enabled: bool = False
    default_profile: bool = False
    default_profile_image: bool = False
    followers_count: int = 0
    friends_count: int = 0
    listed_count: int = 0
    favourites_count: int = 0
    statuses_count: int = 0
    profile_image_url_https: str | None = None
    profile_banner_url: str | None = None
    follow_request_sent: bool | None = Field(
        None,
        description="Pending follow request from the authenticated user; only set in user context",
    )
    following: bool | None = None
    notifications: bool | None = None
    withheld_in_countries: list[str] = Field(default_factory=list)
    withheld_scope: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("created_at", mode="before")
    @classmethod
    def parse_created_at(cls, v: Any) -> Any:
        """Accept the service's ``Wed Oct 10 20:19:24 +0000 2018`` timestamps."""
        if isinstance(v, str):
            try:
                return datetime.strptime(v, CREATED_AT_FORMAT)
            except ValueError:
                # fall through to pydantic's own ISO 8601 parsing
                return v
        return v


class RelationSource(BaseModel):
    """Relationship flags from the point of view of the source account."""

    id: int
    screen_name: str
    following: bool = False
    followed_by: bool = False
    can_dm: bool = False
    blocking: bool | None = None
    marked_spam: bool | None = None
    all_replies: bool | None = None
    want_retweets: bool | None = None
    notifications_enabled: bool | None = None

    model_config = ConfigDict(extra="ignore")


class RelationTarget(BaseModel):
    """Relationship flags from the point of view of the target account."""

    id: int
    screen_name: str
    following: bool = False
    followed_by: bool = False

    model_config = ConfigDict(extra="ignore")


class Relationship(BaseModel):
    """Relationship between two arbitrary accounts."""

    source: RelationSource
    target: RelationTarget

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def unwrap_relationship(cls, data: Any) -> Any:
        """Accept the ``{"relationship": {...}}`` wrapper the service sends."""
        if isinstance(data, dict) and "relationship" in data:
            return data["relationship"]
        return data


class Connection(str, Enum):
    """Ways the authenticated user may be connected to another account."""

    FOLLOWING = "following"
    FOLLOWING_REQUESTED = "following_requested"
    FOLLOWED_BY = "followed_by"
    NONE = "none"
    BLOCKING = "blocking"
    MUTING = "muting"


class RelationLookup(BaseModel):
    """Connections between the authenticated user and one looked-up account."""

    id: int
    screen_name: str
    name: str
    connections: list[Connection] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
