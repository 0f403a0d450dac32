"""
Environment configuration.

TERMTRAILER_CURSOR      cursor strategy name when none is passed explicitly
                        ("relative" or "save-restore")
TERMTRAILER_WRITE_LOG   append every byte sent to a stream sink to this file
TERMTRAILER_DEBUG_LOG   demo CLI: write DEBUG records of the library here
"""
from __future__ import annotations

import os

ENV_CURSOR: str = "TERMTRAILER_CURSOR"
ENV_WRITE_LOG: str = "TERMTRAILER_WRITE_LOG"
ENV_DEBUG_LOG: str = "TERMTRAILER_DEBUG_LOG"

DEFAULT_CURSOR: str = "relative"


def get_cursor_name() -> str:
    """Get the configured cursor strategy name (defaults to "relative")."""
    return os.environ.get(ENV_CURSOR, "").strip().lower() or DEFAULT_CURSOR


def get_write_log_path() -> str | None:
    return os.environ.get(ENV_WRITE_LOG) or None


def get_debug_log_path() -> str | None:
    return os.environ.get(ENV_DEBUG_LOG) or None
