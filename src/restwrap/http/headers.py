# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header defaults, merge policy and bearer authentication.

Every request starts from ``DEFAULT_HEADERS``. Caller headers are layered on top,
except the exact key ``Authorization`` which is treated as a bearer token and handed
to httpx as an auth flow instead of a literal header.
"""

from __future__ import annotations

from collections.abc import Generator, Mapping

import httpx

AUTHORIZATION = "Authorization"
JSON_MEDIA_TYPE = "application/json"
DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": JSON_MEDIA_TYPE,
    "Accept": JSON_MEDIA_TYPE,
}


class BearerAuth(httpx.Auth):
    """httpx auth flow writing ``Authorization: Bearer <token>``."""

    def __init__(self, token: str):
        self.token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers[AUTHORIZATION] = f"Bearer {self.token}"
        yield request


def merge_headers(headers: Mapping[str, str] | None) -> tuple[httpx.Headers, str | None]:
    """
    Apply caller headers over the defaults.

    Returns the merged headers and the bearer token taken from an ``Authorization``
    key (case-sensitive match), or None when the caller supplied none.
    """
    merged = httpx.Headers(DEFAULT_HEADERS)
    token: str | None = None
    for key, value in (headers or {}).items():
        text = "" if value is None else str(value)
        if key == AUTHORIZATION:
            token = text
        else:
            merged[key] = text
    return merged, token


__all__ = [
    "AUTHORIZATION",
    "BearerAuth",
    "DEFAULT_HEADERS",
    "JSON_MEDIA_TYPE",
    "merge_headers",
]
