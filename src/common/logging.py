"""Logging setup shared by the cpquote entrypoints."""

from __future__ import annotations

import logging
from logging import Logger


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int | str = logging.INFO) -> Logger:
    """Install the root handler at ``level`` and hand back the ``cpquote`` logger.

    ``level`` may be a numeric level or a name such as ``"debug"``; unknown
    names fall back to INFO. Library modules only call ``getLogger``.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("cpquote")
