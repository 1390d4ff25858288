# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Raw body serialization chosen by the request Content-Type."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from ..errors import BodyEncodingError
from .forms import encode_form

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
_JSON_TYPE_RE = re.compile(r"^(application|text)/[^;]*json[^;]*$", re.IGNORECASE)


def media_type(content_type: str | None) -> str:
    """Strip parameters from a Content-Type value and lowercase it."""
    return str(content_type or "").split(";", 1)[0].strip().lower()


def is_json_type(content_type: str | None) -> bool:
    return bool(_JSON_TYPE_RE.match(media_type(content_type)))


def encode_raw_body(body: Any, content_type: str | None) -> bytes:
    """
    Serialize ``body`` for sending verbatim.

    Bytes and strings pass through. Other values are JSON encoded when the
    Content-Type is a JSON type or missing, or form encoded when it is
    ``application/x-www-form-urlencoded`` and the value is a mapping.
    """
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")

    media = media_type(content_type)
    if not media or is_json_type(media):
        try:
            return json.dumps(body, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise BodyEncodingError(f"cannot encode body as JSON: {exc}") from exc

    if media == FORM_MEDIA_TYPE and isinstance(body, Mapping):
        return urlencode(encode_form(body)).encode("ascii")

    raise BodyEncodingError(f"cannot encode {type(body).__name__} body as {media!r}")


__all__ = ["FORM_MEDIA_TYPE", "encode_raw_body", "is_json_type", "media_type"]
