"""Process-level setup helpers for the console app."""

from __future__ import annotations

import logging

_LOGGER = logging.getLogger(__name__)
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Send log records to stderr at *level* (name or number)."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            _LOGGER.warning("Unknown log level %r, using WARNING", level)
            resolved = logging.WARNING
        level = resolved
    logging.basicConfig(level=level, format=_FORMAT, force=True)
