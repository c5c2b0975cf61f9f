"""Diagnostics channel used when a remove finds nothing to remove."""

from __future__ import annotations

import logging
import sys
from typing import Callable

WarningSink = Callable[[str], None]

logger = logging.getLogger("idmanager")


def logging_sink(message: str) -> None:
    """
    Default sink. Logs at WARNING on the ``idmanager`` logger.

    With no logging configured, Python's last-resort handler prints the
    line to standard error.
    """
    logger.warning(message)


def stderr_sink(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def silent_sink(message: str) -> None:
    pass
