# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""JSON body decoding for responses."""

from __future__ import annotations

import json
from typing import Any

import httpx

from .errors import EmptyBodyError, InvalidJSONBodyError, ResponseNotFoundError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def decode_json_body(response: httpx.Response | None) -> dict[str, Any]:
    """
    Decode a response body into a mapping.

    Status code and Content-Type are not consulted. An empty object (or a JSON
    ``null``) is rejected: callers use this to pull at least one field out.
    """
    if response is None:
        raise ResponseNotFoundError()

    try:
        body = json.loads(response.content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJSONBodyError(str(exc)) from exc

    if body is None:
        raise EmptyBodyError()
    if not isinstance(body, dict):
        raise InvalidJSONBodyError(f"expected a JSON object, got {type(body).__name__}")
    if not body:
        raise EmptyBodyError()
    return body


__all__ = ["decode_json_body"]
