"""Central configuration for the character wizard.

Values are read from the process environment once at import time. A local
``.env`` file is loaded first so developers can override defaults without
exporting variables by hand.

``WIZARD_LOG_LEVEL`` controls the root log level, ``WIZARD_DEBUG_NAVIGATION``
promotes "no target" navigation decisions from DEBUG to INFO, and
``CHARACTER_BASE_PATH`` is the URL prefix used by both wizard flows.
"""

from __future__ import annotations

import logging
import os
import warnings

from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")
_LOG_LEVEL_NAMES: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _is_truthy_flag(value: str | None) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _parse_log_level(value: str | None, *, default: int = logging.INFO) -> int:
    """Return the numeric log level for ``value`` or ``default``."""

    if value is None:
        return default
    candidate = value.strip().upper()
    if not candidate:
        return default
    if candidate.isdigit():
        return int(candidate)
    if candidate not in _LOG_LEVEL_NAMES:
        warnings.warn(
            "Unknown WIZARD_LOG_LEVEL '%s'; falling back to %s" % (value, logging.getLevelName(default)),
            RuntimeWarning,
        )
        return default
    return getattr(logging, candidate)


def _normalise_base_path(value: str | None, *, default: str = "/characters") -> str:
    """Return ``value`` as an absolute URL prefix without a trailing slash."""

    if value is None:
        return default
    candidate = value.strip().rstrip("/")
    if not candidate:
        return default
    if not candidate.startswith("/"):
        candidate = f"/{candidate}"
    return candidate


LOG_LEVEL = _parse_log_level(os.getenv("WIZARD_LOG_LEVEL"))
DEBUG_NAVIGATION = _is_truthy_flag(os.getenv("WIZARD_DEBUG_NAVIGATION"))
CHARACTER_BASE_PATH = _normalise_base_path(os.getenv("CHARACTER_BASE_PATH"))
DEFAULT_LANGUAGE = os.getenv("LANGUAGE", "en")


__all__ = [
    "CHARACTER_BASE_PATH",
    "DEBUG_NAVIGATION",
    "DEFAULT_LANGUAGE",
    "LOG_LEVEL",
]
