from __future__ import annotations

import logging
import os
from typing import Optional

from .errors import ConfigError

_LOG = logging.getLogger("calc")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_level(level: Optional[str]) -> int:
    if level is None:
        return logging.DEBUG if os.environ.get("CALC_DEBUG") else logging.WARNING
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level {level!r}. Expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stderr handler to the "calc" logger once per process.

    Repeated calls only change the level. Without an explicit level,
    CALC_DEBUG in the environment switches to DEBUG, otherwise WARNING.

    Raises:
        ConfigError: level is not one of LOG_LEVELS.
    """
    _LOG.setLevel(_resolve_level(level))
    if getattr(setup_logging, "_inited", False):
        return _LOG
    setup_logging._inited = True  # type: ignore[attr-defined]
    if not _LOG.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)
    return _LOG


__all__ = ["LOG_LEVELS", "setup_logging"]
