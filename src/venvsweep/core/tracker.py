"""Running total of bytes found or deleted."""

from __future__ import annotations

import logging
import threading

log = logging.getLogger(__name__)


class RunningTotal:
    """Byte accumulator shared with the interrupt handler.

    Python runs signal handlers on the main thread between bytecodes, so the
    handler may fire while the walk holds the lock. The lock is reentrant for
    that reason; an update is a single statement under it, so the handler
    always reads a value from before or after a whole increment.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._bytes = 0

    def add(self, size_bytes: int) -> int:
        """Add *size_bytes* and return the new total."""
        with self._lock:
            self._bytes += size_bytes
            return self._bytes

    @property
    def value(self) -> int:
        with self._lock:
            return self._bytes
