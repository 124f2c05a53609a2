"""Process-wide logging setup for the emotion engine.

Every module asks for its logger through ``get_logger(__name__)``. The first
call attaches one stream handler to the root logger; later calls only re-sync
the level, so importing many modules never duplicates output lines.
"""

from __future__ import annotations

import logging
import os
from typing import Final

_HANDLER_ATTACHED: bool = False
_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
_LEVEL_ENV: Final[str] = "RESILIENCE_LOG_LEVEL"


def _resolve_level(override: str | None = None) -> int:
    level_name = (override or os.getenv(_LEVEL_ENV, "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _attach_handler(level: int) -> None:
    global _HANDLER_ATTACHED

    root = logging.getLogger()
    if not _HANDLER_ATTACHED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        _HANDLER_ATTACHED = True
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger configured with a single stream handler."""
    level = _resolve_level()
    _attach_handler(level)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger


def set_log_level(level_name: str) -> int:
    """
    Force a level for the whole ``resilience`` logger tree (CLI --log-level).

    Side Effects:
        - Sets RESILIENCE_LOG_LEVEL in the process environment
        - Updates root and ``resilience.*`` logger levels
    """
    level = _resolve_level(level_name)
    os.environ[_LEVEL_ENV] = logging.getLevelName(level)
    _attach_handler(level)

    manager = logging.Logger.manager
    for name, logger in list(manager.loggerDict.items()):
        if name.startswith("resilience") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
    return level
