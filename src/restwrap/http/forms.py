# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""String coercion for form-encoded request bodies."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from ..errors import FormEncodingError


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    # Shortest round-trip digits, never in exponent form.
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def coerce_form_value(value: Any) -> str:
    """
    Convert a single form value to its string form.

    Supported inputs: str, bool ("true"/"false"), int, float, Decimal, None (""),
    bytes/bytearray (UTF-8) and Enum members (coerced through their value).
    """
    if isinstance(value, Enum):
        return coerce_form_value(value.value)
    if isinstance(value, str):
        return str(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    raise FormEncodingError(f"cannot use {type(value).__name__} as a form value")


def encode_form(data: Mapping[Any, Any]) -> dict[str, str]:
    """Return a str->str copy of ``data`` suitable for form encoding."""
    return {str(key): coerce_form_value(value) for key, value in data.items()}


__all__ = ["coerce_form_value", "encode_form"]
