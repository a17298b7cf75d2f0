"""Logging configuration for the CLI and API entry-points.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here by whichever edge starts the process.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_HANDLER_NAME = "leadsmith-stderr"


def configure_logging(level: str | int = "INFO") -> None:
    """Attach one stderr handler to the ``leadsmith`` logger and set its level.

    Safe to call repeatedly: a previously installed handler is replaced so the
    new one writes to the current ``sys.stderr``.
    """
    logger = logging.getLogger("leadsmith")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
