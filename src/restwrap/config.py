# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for restwrap."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"restwrap/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class ClientSettings:
    """Defaults applied to every RestClient."""

    timeout: float | None = None
    max_timeout: float = 3600.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT
    patch_as_post: bool = False

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_timeout = _float_env("RESTWRAP_HTTP_MAX_TIMEOUT", cls.max_timeout)
        if max_timeout <= 0:
            max_timeout = cls.max_timeout
        return cls(
            timeout=_optional_float_env("RESTWRAP_HTTP_TIMEOUT", cls.timeout),
            max_timeout=max_timeout,
            verify_ssl=_bool_env("RESTWRAP_HTTP_VERIFY_SSL", cls.verify_ssl),
            user_agent=os.getenv("RESTWRAP_USER_AGENT", cls.user_agent),
            patch_as_post=_bool_env("RESTWRAP_PATCH_AS_POST", cls.patch_as_post),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()
