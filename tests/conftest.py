# tests/conftest.py
from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from urllib.parse import parse_qsl

import httpx
import pytest

from social_graph.auth import Credentials, Token
from social_graph.core.settings import Settings
from social_graph.transport import Transport

TEST_BASE_URL = "https://api.example.test"


def user_json(user_id: int, screen_name: str, **extra: Any) -> dict[str, Any]:
    """Minimal user record as the service sends it."""
    payload: dict[str, Any] = {
        "id": user_id,
        "screen_name": screen_name,
        "name": screen_name.title(),
    }
    payload.update(extra)
    return payload


def request_params(request: httpx.Request) -> dict[str, str]:
    """Return query parameters for GET requests and form fields for POST."""
    if request.method == "GET":
        return dict(request.url.params)
    return dict(parse_qsl(request.content.decode()))


class RecordingHandler:
    """Mock transport handler that replays queued responses and records requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: list[httpx.Response | Exception] = []

    def queue(
        self,
        body: Any = None,
        status: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._queue.append(httpx.Response(status, json=body, headers=headers))

    def queue_raw(self, content: bytes, status: int = 200) -> None:
        self._queue.append(httpx.Response(status, content=content))

    def queue_error(self, exc: Exception) -> None:
        self._queue.append(exc)

    @property
    def params(self) -> list[dict[str, str]]:
        return [request_params(req) for req in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(
        consumer=Token("consumer-key", "consumer-secret"),
        access=Token("access-key", "access-secret"),
    )


@pytest.fixture()
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture()
def transport(handler: RecordingHandler) -> Iterator[Transport]:
    client = httpx.Client(base_url=TEST_BASE_URL, transport=httpx.MockTransport(handler))
    transport = Transport(config=Settings(), client=client)
    try:
        yield transport
    finally:
        transport.close()
