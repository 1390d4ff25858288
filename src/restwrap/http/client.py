# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed REST client facade."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import ClientSettings, load_client_settings
from ..log import get_trace_logger
from .headers import AUTHORIZATION, BearerAuth
from .models import Headers, RestRequest

logger = logging.getLogger(__name__)

_TRACE_START_KEY = "restwrap.trace_start"


class RestClient:
    """
    Preconfigured synchronous client for a single host.

    Relative URLs are resolved against ``host``; absolute URLs are used as given.
    HTTP error statuses are returned in the response and httpx exceptions
    propagate unchanged.
    """

    def __init__(
        self,
        host: str,
        debug: bool = False,
        *,
        settings: ClientSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings or load_client_settings()
        self._host = host
        self._debug = bool(debug)
        self._timeout = self.settings.timeout

        client_kwargs: dict[str, Any] = {
            "base_url": host,
            "verify": self.settings.verify_ssl,
            "headers": {"User-Agent": self.settings.user_agent},
        }
        if self._timeout is not None:
            client_kwargs["timeout"] = self._timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        if self._debug:
            client_kwargs["event_hooks"] = {
                "request": [_trace_request],
                "response": [_trace_response],
            }
        self._client = httpx.Client(**client_kwargs)

    @property
    def host(self) -> str:
        return self._host

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def timeout(self) -> float | None:
        """Request timeout in seconds, or None for the httpx default."""
        return self._timeout

    @property
    def http_client(self) -> httpx.Client:
        """The underlying httpx.Client."""
        return self._client

    def set_timeout(self, seconds: float) -> None:
        """
        Replace the request timeout for subsequent requests.

        Rejected values (non-numeric, non-finite, not positive, or above
        ``settings.max_timeout``) are ignored with a warning.
        """
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            logger.warning("Ignoring timeout %r: not a number", seconds)
            return
        value = float(seconds)
        if not math.isfinite(value) or value <= 0 or value > self.settings.max_timeout:
            logger.warning("Ignoring timeout %r: outside (0, %s]", seconds, self.settings.max_timeout)
            return
        self._client.timeout = httpx.Timeout(value)
        self._timeout = value

    def new_request(self, headers: Headers | None = None) -> RestRequest:
        """Return a request carrying the default and caller headers, ready for ``execute``."""
        return RestRequest.from_headers(headers)

    def execute(self, method: str, url: str, request: RestRequest) -> httpx.Response:
        """Dispatch ``request`` and return the raw response."""
        send_kwargs: dict[str, Any] = {}
        if request.token:
            send_kwargs["auth"] = BearerAuth(request.token)
        return self._client.send(request.build(self._client, method, url), **send_kwargs)

    def get(self, url: str, headers: Headers | None = None) -> httpx.Response:
        return self.execute("GET", url, self.new_request(headers))

    def head(self, url: str, headers: Headers | None = None) -> httpx.Response:
        return self.execute("HEAD", url, self.new_request(headers))

    def delete(self, url: str, headers: Headers | None = None) -> httpx.Response:
        return self.execute("DELETE", url, self.new_request(headers))

    def post(self, url: str, headers: Headers | None = None, data: Mapping[str, Any] | None = None) -> httpx.Response:
        """POST ``data`` form-encoded."""
        return self.execute("POST", url, self.new_request(headers).set_form(data))

    def put(self, url: str, headers: Headers | None = None, data: Mapping[str, Any] | None = None) -> httpx.Response:
        """PUT ``data`` form-encoded."""
        return self.execute("PUT", url, self.new_request(headers).set_form(data))

    def post_raw(self, url: str, headers: Headers | None = None, body: Any = None) -> httpx.Response:
        """POST ``body`` serialized for the request Content-Type (JSON by default)."""
        return self.execute("POST", url, self.new_request(headers).set_body(body))

    def patch_raw(self, url: str, headers: Headers | None = None, body: Any = None) -> httpx.Response:
        """
        PATCH ``body`` serialized for the request Content-Type.

        With ``settings.patch_as_post`` the request is sent as POST instead, for
        servers written against older releases that always did so.
        """
        method = "POST" if self.settings.patch_as_post else "PATCH"
        return self.execute(method, url, self.new_request(headers).set_body(body))

    def delete_raw(self, url: str, headers: Headers | None = None, body: Any = None) -> httpx.Response:
        """DELETE with ``body`` serialized for the request Content-Type."""
        return self.execute("DELETE", url, self.new_request(headers).set_body(body))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

    def __repr__(self) -> str:
        return f"RestClient(host={self._host!r}, debug={self._debug!r})"


def _redacted_headers(headers: httpx.Headers) -> dict[str, str]:
    return {key: ("<redacted>" if key.lower() == AUTHORIZATION.lower() else value) for key, value in headers.items()}


def _trace_request(request: httpx.Request) -> None:
    request.extensions[_TRACE_START_KEY] = time.monotonic()
    get_trace_logger().debug(
        "request %s %s headers=%s body_bytes=%s",
        request.method,
        request.url,
        _redacted_headers(request.headers),
        request.headers.get("Content-Length", "0"),
    )


def _trace_response(response: httpx.Response) -> None:
    request = response.request
    started = request.extensions.get(_TRACE_START_KEY)
    elapsed_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
    get_trace_logger().debug(
        "response %s %s -> %s in %.1fms",
        request.method,
        request.url,
        response.status_code,
        elapsed_ms,
    )


def create_client(
    host: str,
    debug: bool = False,
    *,
    settings: ClientSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> RestClient:
    """Factory for a RestClient bound to a fresh httpx.Client."""
    return RestClient(host, debug, settings=settings, transport=transport)


new = create_client

__all__ = ["RestClient", "create_client", "new"]
