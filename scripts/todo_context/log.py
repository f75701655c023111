"""Logging setup for the storage and todo_context packages.

Environment Variables:
    DEBUG (optional): If set, enables debug logging to stderr.
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAMES: tuple[str, ...] = ("storage", "todo_context")
LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"
HANDLER_NAME: str = "todo_context.stderr"


def configure_logging(debug: bool | None = None) -> None:
    """Send storage and todo_context log records to stderr.

    Args:
        debug: Log at DEBUG level when true, WARNING otherwise. If None, the
            DEBUG environment variable decides.
    """
    if debug is None:
        debug = bool(os.environ.get("DEBUG"))
    level = logging.DEBUG if debug else logging.WARNING

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler.set_name(HANDLER_NAME)
            logger.addHandler(handler)
