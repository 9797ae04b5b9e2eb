"""Logging for the Todoist client.

Modules of ``todoist_api`` only ever call :func:`get_logger`; they never touch
handlers or the root logger, so an application embedding the client keeps full
control of its logging.  Handlers are installed by :func:`configure_logging`,
which only applications call (``tdcli`` does so in its callback, at DEBUG with
``--verbose`` and WARNING otherwise).
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.logging import RichHandler


def configure_logging(level: int = logging.INFO) -> None:
    """Send records to the console through rich; calling it again only changes the level."""
    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return
    handler = RichHandler(rich_tracebacks=True, markup=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Logger for *name* (normally ``__name__``), optionally pinned to *level*."""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
