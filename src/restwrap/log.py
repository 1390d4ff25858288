# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for restwrap."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("RESTWRAP_LOG_LEVEL", "WARNING").upper()
TRACE_LOGGER_NAME = "restwrap.trace"


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for scripts embedding the client."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def get_trace_logger() -> logging.Logger:
    """Return the logger used by the debug request trace."""
    return logging.getLogger(TRACE_LOGGER_NAME)


__all__ = ["TRACE_LOGGER_NAME", "get_trace_logger", "setup_logging"]
