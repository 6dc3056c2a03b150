"""HTTP transport for the social graph API.

This module provides the Transport class that performs signed requests
against the remote service. It includes:

- A synchronous httpx client configured from settings
- Per-request OAuth/bearer signing with explicitly supplied credentials
- Mapping of network failures and error statuses onto library exceptions
- Metrics collection for monitoring

The transport never retries; a failed request is reported to the caller once.
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from social_graph.auth import AnyCredentials, sign_request
from social_graph.core.settings import Settings, settings
from social_graph.errors import ApiError, TransportError
from social_graph.parsing import decode_errors

# Configure logger for this module
logger = logging.getLogger(__name__)

HTTP_BAD_REQUEST = 400


@dataclass
class RequestMetrics:
    """Metrics collection for API requests."""

    request_count: int = 0
    success_count: int = 0
    error_count: int = 0
    total_response_time: float = 0.0
    error_counts_by_type: dict[str, int] = field(default_factory=lambda: defaultdict(int))
    endpoint_counts: dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def record_request(
        self, endpoint: str, response_time: float, success: bool, error_type: str | None = None
    ) -> None:
        """Record a request metric."""
        self.request_count += 1
        self.total_response_time += response_time
        self.endpoint_counts[endpoint] += 1

        if success:
            self.success_count += 1
        else:
            self.error_count += 1
            if error_type:
                self.error_counts_by_type[error_type] += 1

    def get_average_response_time(self) -> float:
        """Get average response time."""
        return self.total_response_time / self.request_count if self.request_count > 0 else 0.0


class Transport:
    """Signed request/response round trips against the API."""

    def __init__(
        self,
        config: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or settings
        self._client = client or httpx.Client(
            base_url=self.config.api_base_url,
            timeout=httpx.Timeout(self.config.http_timeout_seconds),
            headers={"User-Agent": self.config.user_agent},
        )
        self._metrics = RequestMetrics()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def url_for(self, endpoint: str) -> str:
        """Return the absolute URL of an endpoint path."""
        return f"{str(self._client.base_url).rstrip('/')}{endpoint}"

    def request(
        self,
        method: str,
        endpoint: str,
        params: Mapping[str, str] | None,
        credentials: AnyCredentials,
    ) -> httpx.Response:
        """Perform one signed request.

        Args:
            method: ``GET`` or ``POST``.
            endpoint: Endpoint path from ``social_graph.links``.
            params: Query parameters for GET, form fields for POST.
            credentials: Credentials used to sign this request.

        Returns:
            The successful (status < 400) response.

        Raises:
            TransportError: If the request could not complete.
            ApiError: If the service responded with an error status.
        """
        method = method.upper()
        request_params: dict[str, Any] = dict(params or {})
        headers = {
            "Authorization": sign_request(
                method, self.url_for(endpoint), request_params, credentials
            )
        }

        start_time = time.time()
        label = f"{method} {endpoint}"
        success = False
        error_type = None

        try:
            if method == "GET":
                response = self._client.request(
                    method, endpoint, params=request_params, headers=headers
                )
            else:
                response = self._client.request(
                    method, endpoint, data=request_params, headers=headers
                )
        except httpx.HTTPError as exc:
            error_type = "network_error"
            logger.warning("Request %s failed: %s", label, exc)
            raise TransportError(f"Request to {endpoint} failed: {exc}") from exc
        else:
            if response.status_code >= HTTP_BAD_REQUEST:
                error_type = f"http_{response.status_code}"
                logger.warning("Request %s returned %d", label, response.status_code)
                raise ApiError(response.status_code, decode_errors(response), endpoint)
            success = True
        finally:
            self._metrics.record_request(label, time.time() - start_time, success, error_type)

        return response

    def get(
        self, endpoint: str, params: Mapping[str, str] | None, credentials: AnyCredentials
    ) -> httpx.Response:
        return self.request("GET", endpoint, params, credentials)

    def post(
        self, endpoint: str, params: Mapping[str, str] | None, credentials: AnyCredentials
    ) -> httpx.Response:
        return self.request("POST", endpoint, params, credentials)

    def get_metrics(self) -> dict[str, Any]:
        """Get request metrics.

        Returns:
            Dictionary containing performance and usage metrics
        """
        return {
            "request_count": self._metrics.request_count,
            "success_count": self._metrics.success_count,
            "error_count": self._metrics.error_count,
            "average_response_time": self._metrics.get_average_response_time(),
            "error_counts_by_type": dict(self._metrics.error_counts_by_type),
            "endpoint_counts": dict(self._metrics.endpoint_counts),
        }

    def close(self) -> None:
        """Clean up underlying HTTP client resources."""
        self._client.close()


class _TransportSingleton:
    """Singleton wrapper for Transport."""

    _instance: Transport | None = None

    @classmethod
    def get_instance(cls) -> Transport:
        """Get or create the singleton Transport instance."""
        if cls._instance is None:
            cls._instance = Transport()
        return cls._instance


def get_transport() -> Transport:
    """Return the shared default transport (it holds no credentials)."""
    return _TransportSingleton.get_instance()
