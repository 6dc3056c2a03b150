"""Decoding of raw HTTP responses into pages and single values."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from social_graph.errors import ApiErrorDetail, DecodeError
from social_graph.schemas.common import Cursor, Page, RateLimit, Response

T = TypeVar("T")
C = TypeVar("C", bound=Cursor)

logger = logging.getLogger(__name__)

RATE_LIMIT_HEADER = "x-rate-limit-limit"
RATE_LIMIT_REMAINING_HEADER = "x-rate-limit-remaining"
RATE_LIMIT_RESET_HEADER = "x-rate-limit-reset"


def _header_int(response: httpx.Response, name: str) -> int:
    raw = response.headers.get(name)
    if raw is None:
        return -1
    try:
        return int(raw)
    except ValueError:
        logger.debug("Ignoring non-numeric %s header: %r", name, raw)
        return -1


def rate_limit_from(response: httpx.Response) -> RateLimit:
    """Read the rate-limit snapshot from response headers."""
    return RateLimit(
        limit=_header_int(response, RATE_LIMIT_HEADER),
        remaining=_header_int(response, RATE_LIMIT_REMAINING_HEADER),
        reset=_header_int(response, RATE_LIMIT_RESET_HEADER),
    )


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"Response body is not valid JSON: {exc}") from exc


def decode_page(response: httpx.Response, model: type[C]) -> Page[Any]:
    """Decode a cursored page envelope.

    Args:
        response: Raw response of a cursored listing request.
        model: Envelope model for the listing shape (``UserCursor`` or ``IDCursor``).

    Returns:
        The page with its items, both cursors and the rate-limit snapshot.

    Raises:
        DecodeError: If the body is not JSON, lacks a cursor field or holds
            items of the wrong shape.
    """
    try:
        envelope = model.model_validate(_json_body(response))
    except ValidationError as exc:
        raise DecodeError(f"Malformed {model.__name__} page: {exc}") from exc

    return Page(
        items=list(envelope.items),  # type: ignore[attr-defined]
        previous_cursor=envelope.previous_cursor,
        next_cursor=envelope.next_cursor,
        rate_limit=rate_limit_from(response),
    )


def decode_single(response: httpx.Response, target: type[T] | Any) -> Response[T]:
    """Decode a non-paginated response body into ``target``.

    ``target`` may be a model class or any type pydantic understands, such as
    ``list[TwitterUser]`` or ``list[int]``.
    """
    try:
        value = TypeAdapter(target).validate_python(_json_body(response))
    except ValidationError as exc:
        raise DecodeError(f"Malformed response body: {exc}") from exc
    return Response(rate_limit=rate_limit_from(response), response=value)


def decode_errors(response: httpx.Response) -> list[ApiErrorDetail]:
    """Best-effort extraction of ``{"errors": [{"code", "message"}]}`` bodies."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return []
    if not isinstance(body, dict):
        return []

    details = []
    for item in body.get("errors", []) or []:
        if isinstance(item, dict):
            code = item.get("code", 0)
            details.append(
                ApiErrorDetail(
                    code=code if isinstance(code, int) else 0,
                    message=str(item.get("message", "")),
                )
            )
    if not details and isinstance(body.get("error"), str):
        details.append(ApiErrorDetail(code=0, message=body["error"]))
    return details
