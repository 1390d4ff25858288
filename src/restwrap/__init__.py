# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
restwrap package entrypoint.

A thin facade over httpx: ``new(host, debug)`` returns a RestClient that sends
JSON-flavoured requests with default headers and bearer auth, and
``decode_json_body`` turns a response body into a dict.
"""

from .config import ClientSettings, load_client_settings
from .decoder import decode_json_body
from .errors import (
    BodyEncodingError,
    DecodeError,
    EmptyBodyError,
    EncodingError,
    FormEncodingError,
    InvalidJSONBodyError,
    ResponseNotFoundError,
    RestwrapError,
)
from .http import RestClient, RestRequest, create_client, new
from .log import setup_logging
from .version import __version__

__all__ = [
    "BodyEncodingError",
    "ClientSettings",
    "DecodeError",
    "EmptyBodyError",
    "EncodingError",
    "FormEncodingError",
    "InvalidJSONBodyError",
    "ResponseNotFoundError",
    "RestClient",
    "RestRequest",
    "RestwrapError",
    "create_client",
    "decode_json_body",
    "load_client_settings",
    "new",
    "setup_logging",
    "__version__",
]
