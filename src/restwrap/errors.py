# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers.

Transport failures are raised by httpx and reach callers untouched. The classes here
cover the failures restwrap itself detects: body encoding before dispatch and JSON
decoding after it.
"""

from __future__ import annotations

RESPONSE_NOT_FOUND = "response not found"
INVALID_JSON_BODY = "invalid JSON body"
BODY_NOT_FOUND = "body not found"


class RestwrapError(Exception):
    """Base class for errors raised by restwrap itself."""


class DecodeError(RestwrapError, ValueError):
    """A response body could not be turned into a mapping."""


class ResponseNotFoundError(DecodeError):
    def __init__(self, message: str = RESPONSE_NOT_FOUND):
        super().__init__(message)


class InvalidJSONBodyError(DecodeError):
    """The body is not JSON, or is JSON but not an object."""

    def __init__(self, detail: str):
        super().__init__(f"{INVALID_JSON_BODY}: {detail}")
        self.detail = detail


class EmptyBodyError(DecodeError):
    def __init__(self, message: str = BODY_NOT_FOUND):
        super().__init__(message)


class EncodingError(RestwrapError, TypeError):
    """A request body value cannot be encoded."""


class FormEncodingError(EncodingError):
    pass


class BodyEncodingError(EncodingError):
    pass


__all__ = [
    "BODY_NOT_FOUND",
    "INVALID_JSON_BODY",
    "RESPONSE_NOT_FOUND",
    "BodyEncodingError",
    "DecodeError",
    "EmptyBodyError",
    "EncodingError",
    "FormEncodingError",
    "InvalidJSONBodyError",
    "ResponseNotFoundError",
    "RestwrapError",
]
