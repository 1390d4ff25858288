# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request model built by RestClient before dispatch."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from .body import FORM_MEDIA_TYPE, encode_raw_body
from .forms import encode_form
from .headers import merge_headers

Headers = dict[str, str]


@dataclass
class RestRequest:
    """
    Transient request description: merged headers, optional bearer token and at
    most one body (form fields or pre-encoded raw bytes).
    """

    headers: httpx.Headers = field(default_factory=httpx.Headers)
    token: str | None = None
    form: dict[str, str] | None = None
    content: bytes | None = None
    caller_content_type: bool = False

    @classmethod
    def from_headers(cls, headers: Mapping[str, str] | None = None) -> RestRequest:
        merged, token = merge_headers(headers)
        caller_content_type = any(str(key).lower() == "content-type" for key in (headers or {}))
        return cls(headers=merged, token=token, caller_content_type=caller_content_type)

    @property
    def content_type(self) -> str:
        return self.headers.get("Content-Type", "")

    def set_form(self, data: Mapping[Any, Any] | None) -> RestRequest:
        """
        Attach a form body; None leaves the request without one.

        A non-empty form replaces the default Content-Type with the form media
        type unless the caller supplied one.
        """
        if data is not None:
            self.form = encode_form(data)
            self.content = None
            if self.form and not self.caller_content_type:
                self.headers["Content-Type"] = FORM_MEDIA_TYPE
        return self

    def set_body(self, body: Any) -> RestRequest:
        """Attach a raw body encoded for the current Content-Type; None is a no-op."""
        if body is not None:
            self.content = encode_raw_body(body, self.content_type)
            self.form = None
        return self

    def build(self, client: httpx.Client, method: str, url: str) -> httpx.Request:
        """Turn this description into an httpx.Request bound to ``client``'s base URL and timeout."""
        return client.build_request(
            method,
            url,
            headers=self.headers,
            data=self.form or None,
            content=self.content,
        )


__all__ = ["Headers", "RestRequest"]
