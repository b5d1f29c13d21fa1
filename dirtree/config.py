"""Persistent JSON config helpers.

Stores the log level used by command-line runs.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_LEVEL_ENV = "DIRTREE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_log_level(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    normalized = value.strip().upper()
    return normalized if normalized in LOG_LEVELS else None


def load_log_level() -> str:
    """Resolve the log level name.

    ``DIRTREE_LOG_LEVEL`` wins over the ``log_level`` config key; unknown
    names are ignored and ``WARNING`` is the fallback.
    """
    from_env = _coerce_log_level(os.environ.get(LOG_LEVEL_ENV))
    if from_env is not None:
        return from_env
    from_config = _coerce_log_level(load_config().get("log_level"))
    return from_config if from_config is not None else DEFAULT_LOG_LEVEL


def log_level_value(name: str) -> int:
    """Map a level name from ``load_log_level`` to its ``logging`` constant."""
    return logging.getLevelName(name) if name in LOG_LEVELS else logging.WARNING
