"""Process-wide flag recording whether the application should keep running."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class RunningTracker:
    """Thread-safe running flag that can be cleared once with a reason."""

    def __init__(self) -> None:
        self._stopped = threading.Event()

    def quit(self, reason: str) -> None:
        """Mark the application as stopping."""
        self._stopped.set()
        logger.info("Quit %s", reason)

    def is_running(self) -> bool:
        return not self._stopped.is_set()


RUNNING_TRACKER = RunningTracker()