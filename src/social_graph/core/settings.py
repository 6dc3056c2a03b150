"""Client settings and configuration.

This module defines all configuration options for the social graph client.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files. They
    only supply defaults: API calls never read credentials from here on their
    own, callers build a ``Credentials`` value and pass it in.
    """

    # Remote service
    api_base_url: str = Field(
        default="https://api.twitter.com",
        alias="SOCIAL_GRAPH_API_BASE_URL",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        alias="SOCIAL_GRAPH_HTTP_TIMEOUT_SECONDS",
    )
    user_agent: str = Field(default="social-graph/0.1.0", alias="SOCIAL_GRAPH_USER_AGENT")

    # Default page sizes per listing shape
    user_page_size: int = Field(default=20, ge=1, le=200, alias="SOCIAL_GRAPH_USER_PAGE_SIZE")
    id_page_size: int = Field(default=500, ge=1, le=5000, alias="SOCIAL_GRAPH_ID_PAGE_SIZE")
    search_page_size: int = Field(
        default=10,
        ge=1,
        le=20,
        alias="SOCIAL_GRAPH_SEARCH_PAGE_SIZE",
    )

    # Consecutive empty pages tolerated before a cursor is considered stalled
    max_empty_pages: int = Field(default=50, ge=1, alias="SOCIAL_GRAPH_MAX_EMPTY_PAGES")

    # Optional OAuth material, used by scripts only
    consumer_key: str | None = Field(default=None, alias="SOCIAL_GRAPH_CONSUMER_KEY")
    consumer_secret: str | None = Field(default=None, alias="SOCIAL_GRAPH_CONSUMER_SECRET")
    access_token: str | None = Field(default=None, alias="SOCIAL_GRAPH_ACCESS_TOKEN")
    access_token_secret: str | None = Field(
        default=None,
        alias="SOCIAL_GRAPH_ACCESS_TOKEN_SECRET",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def has_user_credentials(self) -> bool:
        """Return True when all four OAuth values are configured."""
        return all(
            (
                self.consumer_key,
                self.consumer_secret,
                self.access_token,
                self.access_token_secret,
            )
        )


settings = Settings()
