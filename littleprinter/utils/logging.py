"""Root logging setup for applications built on the printer client.

The package itself only creates module loggers. An application calls
:func:`configure_root` once at startup, before building an ``AppController``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VARS = ("LITTLEPRINTER_LOG_LEVEL",)
_DEBUG_FLAGS = ("LITTLEPRINTER_DEBUG",)
# Chatty at DEBUG: connection pool churn and PNG chunk traces.
_NOISY_LOGGERS = ("urllib3", "PIL")


def _coerce_level(value: Optional[str], fallback: int) -> int:
    if not value:
        return fallback
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    if isinstance(candidate, int):
        return candidate
    return fallback


def _env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_env_level() -> Optional[int]:
    for var in _LEVEL_ENV_VARS:
        value = os.getenv(var)
        if value:
            return _coerce_level(value, logging.INFO)
    if any(_env_truthy(os.getenv(flag)) for flag in _DEBUG_FLAGS):
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.INFO) -> int:
    """
    Configure the root logger with a compact format.

    Entry point for applications; call once at startup. Returns the
    effective root level.

    Environment overrides:
      - LITTLEPRINTER_LOG_LEVEL: explicit log level (name or number)
      - LITTLEPRINTER_DEBUG: truthy -> DEBUG
    """
    fallback = (
        _coerce_level(default_level, logging.INFO)
        if isinstance(default_level, str)
        else int(default_level)
    )
    env_level = _resolve_env_level()
    effective = env_level if env_level is not None else fallback

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    quiet_third_party()
    return effective


def quiet_third_party() -> None:
    """Hold transport and imaging loggers at WARNING unless DEBUG is forced."""
    level = logging.DEBUG if env_transport_debug() else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)


def env_transport_debug() -> bool:
    """Return True if environment variables force DEBUG logging.

    At DEBUG the printer adapter also logs fetched info payloads.
    """
    env_level = _resolve_env_level()
    if env_level is None:
        return False
    return env_level <= logging.DEBUG
