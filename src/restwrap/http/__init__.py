# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .body import FORM_MEDIA_TYPE, encode_raw_body, is_json_type
from .client import RestClient, create_client, new
from .forms import coerce_form_value, encode_form
from .headers import DEFAULT_HEADERS, BearerAuth, merge_headers
from .models import Headers, RestRequest

__all__ = [
    "DEFAULT_HEADERS",
    "FORM_MEDIA_TYPE",
    "BearerAuth",
    "Headers",
    "RestClient",
    "RestRequest",
    "coerce_form_value",
    "create_client",
    "encode_form",
    "encode_raw_body",
    "is_json_type",
    "merge_headers",
    "new",
]
