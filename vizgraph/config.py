"""Configuration helpers for loading environment variables.

Variables defined in a project-level ``.env`` file are loaded once before any
lookup. Consumers should rely on :func:`get_env` (or the typed helpers below)
instead of :func:`os.getenv` so configuration is read in a single place.
Values already present in the process environment take precedence.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_FILE = Path(__file__).resolve().parents[1] / ".env"


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from ``ENV_FILE``.

    When the file does not exist :func:`load_dotenv` still runs with its
    default discovery so a ``.env`` found elsewhere is honoured. Subsequent
    calls are cached; clear the cache to reload.
    """

    if ENV_FILE.exists():
        load_dotenv(ENV_FILE, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def get_float(key: str, default: float) -> float:
    """Return ``key`` parsed as a float, raising ``ValueError`` when malformed."""

    raw = get_env(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc


def get_int(key: str, default: int) -> int:
    raw = get_env(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from exc


ENGINE = "VIZGRAPH_ENGINE"
FORMAT = "VIZGRAPH_FORMAT"
RENDER_ATTEMPTS = "VIZGRAPH_RENDER_ATTEMPTS"
DISPLAY_DELAY = "VIZGRAPH_DISPLAY_DELAY"


__all__ = [
    "DISPLAY_DELAY",
    "ENGINE",
    "FORMAT",
    "RENDER_ATTEMPTS",
    "get_env",
    "get_float",
    "get_int",
]
