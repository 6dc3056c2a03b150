# tests/test_auth.py
"""Tests for OAuth 1.0a and bearer request signing."""

import base64
import hashlib
import hmac
import re

import pytest

from social_graph.auth import (
    BearerCredentials,
    Credentials,
    Token,
    percent_encode,
    sign_request,
    signature_base_string,
)
from social_graph.core.settings import Settings


class TestPercentEncode:
    """RFC 3986 encoding used in signature base strings."""

    def test_unreserved_characters_are_kept(self):
        assert percent_encode("Az09-._~") == "Az09-._~"

    def test_reserved_characters_are_encoded(self):
        assert percent_encode("a b/c,d!") == "a%20b%2Fc%2Cd%21"

    def test_unicode_is_utf8_encoded(self):
        assert percent_encode("☃") == "%E2%98%83"


def test_signature_base_string_sorts_and_encodes():
    base = signature_base_string(
        "get",
        "https://api.example.test/1.1/users/show.json",
        {"screen_name": "rust lang", "b": "2", "a": "1"},
    )

    assert base == (
        "GET&https%3A%2F%2Fapi.example.test%2F1.1%2Fusers%2Fshow.json"
        "&a%3D1%26b%3D2%26screen_name%3Drust%2520lang"
    )


def test_sign_request_produces_verifiable_oauth_header(credentials):
    url = "https://api.example.test/1.1/friends/ids.json"
    params = {"screen_name": "rustlang", "cursor": "10"}

    header = sign_request("GET", url, params, credentials, nonce="abc123", timestamp=1318622958)

    assert header.startswith("OAuth ")
    fields = dict(re.findall(r'(\w+)="([^"]*)"', header))
    assert fields["oauth_consumer_key"] == "consumer-key"
    assert fields["oauth_token"] == "access-key"
    assert fields["oauth_nonce"] == "abc123"
    assert fields["oauth_timestamp"] == "1318622958"
    assert fields["oauth_signature_method"] == "HMAC-SHA1"
    assert fields["oauth_version"] == "1.0"

    signed = {**params, **{k: v for k, v in fields.items() if k != "oauth_signature"}}
    base = signature_base_string("GET", url, signed)
    expected = base64.b64encode(
        hmac.new(b"consumer-secret&access-secret", base.encode(), hashlib.sha1).digest()
    ).decode()
    assert fields["oauth_signature"] == percent_encode(expected)


def test_sign_request_changes_with_params(credentials):
    url = "https://api.example.test/1.1/friends/ids.json"
    first = sign_request("GET", url, {"cursor": "1"}, credentials, nonce="n", timestamp=1)
    second = sign_request("GET", url, {"cursor": "2"}, credentials, nonce="n", timestamp=1)

    assert first != second


def test_bearer_credentials():
    header = sign_request("GET", "https://x.test/", None, BearerCredentials("AAAA"))

    assert header == "Bearer AAAA"


def test_credentials_from_settings():
    config = Settings(
        consumer_key="ck",
        consumer_secret="cs",
        access_token="ak",
        access_token_secret="as",
    )

    assert Credentials.from_settings(config) == Credentials(Token("ck", "cs"), Token("ak", "as"))


def test_credentials_from_incomplete_settings():
    with pytest.raises(ValueError, match="not fully configured"):
        Credentials.from_settings(Settings(consumer_key="ck"))
