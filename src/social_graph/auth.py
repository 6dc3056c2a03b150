"""Request signing for user (OAuth 1.0a) and application-only credentials.

Credentials are plain immutable values. Every API call receives them as an
argument and hands them to the transport, which asks this module for the
``Authorization`` header of that one request.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import secrets
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from social_graph.core.settings import Settings

OAUTH_VERSION = "1.0"
OAUTH_SIGNATURE_METHOD = "HMAC-SHA1"


@dataclass(frozen=True)
class Token:
    """A key/secret pair, used for both consumer and access tokens."""

    key: str
    secret: str


@dataclass(frozen=True)
class Credentials:
    """OAuth 1.0a user context: the application token plus the user's access token."""

    consumer: Token
    access: Token

    @classmethod
    def from_settings(cls, config: Settings) -> Credentials:
        """Build credentials from configured OAuth values."""
        if not config.has_user_credentials:
            raise ValueError("OAuth consumer and access tokens are not fully configured")
        return cls(
            consumer=Token(config.consumer_key or "", config.consumer_secret or ""),
            access=Token(config.access_token or "", config.access_token_secret or ""),
        )


@dataclass(frozen=True)
class BearerCredentials:
    """Application-only context authenticated with a bearer token."""

    token: str


AnyCredentials = Credentials | BearerCredentials


def percent_encode(value: str) -> str:
    """Percent-encode a value per RFC 3986 (unreserved characters kept)."""
    return quote(value, safe="~")


def signature_base_string(method: str, url: str, params: Mapping[str, str]) -> str:
    """Return the OAuth signature base string for a request."""
    encoded = sorted((percent_encode(k), percent_encode(v)) for k, v in params.items())
    param_string = "&".join(f"{k}={v}" for k, v in encoded)
    return "&".join(
        (method.upper(), percent_encode(url), percent_encode(param_string))
    )


def hmac_sha1_signature(base_string: str, consumer_secret: str, token_secret: str) -> str:
    """Sign a base string with the consumer and token secrets."""
    key = f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"
    digest = hmac.new(key.encode(), base_string.encode(), hashlib.sha1).digest()
    return base64.b64encode(digest).decode()


def sign_request(
    method: str,
    url: str,
    params: Mapping[str, str] | None,
    credentials: AnyCredentials,
    *,
    nonce: str | None = None,
    timestamp: int | None = None,
) -> str:
    """Return the ``Authorization`` header value for a single request.

    Args:
        method: HTTP method of the request.
        url: Absolute URL without query string.
        params: Query or form parameters that will be sent.
        credentials: User or application credentials.
        nonce: Override for the OAuth nonce (tests only).
        timestamp: Override for the OAuth timestamp (tests only).

    Returns:
        Header value, either ``OAuth ...`` or ``Bearer ...``.
    """
    if isinstance(credentials, BearerCredentials):
        return f"Bearer {credentials.token}"

    oauth_params = {
        "oauth_consumer_key": credentials.consumer.key,
        "oauth_nonce": nonce or secrets.token_hex(16),
        "oauth_signature_method": OAUTH_SIGNATURE_METHOD,
        "oauth_timestamp": str(timestamp if timestamp is not None else int(time.time())),
        "oauth_token": credentials.access.key,
        "oauth_version": OAUTH_VERSION,
    }
    base_string = signature_base_string(method, url, {**(params or {}), **oauth_params})
    oauth_params["oauth_signature"] = hmac_sha1_signature(
        base_string, credentials.consumer.secret, credentials.access.secret
    )

    header = ", ".join(
        f'{percent_encode(k)}="{percent_encode(v)}"' for k, v in sorted(oauth_params.items())
    )
    return f"OAuth {header}"
