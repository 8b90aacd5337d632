"""Ctrl+C handling: print the partial summary and leave immediately."""

from __future__ import annotations

import logging
import os
import signal
import sys
from typing import Callable

from venvsweep.core.tracker import RunningTotal
from venvsweep.utils import bytes_to_human

log = logging.getLogger(__name__)

ExitFunc = Callable[[int], object]


def summary_line(total_bytes: int, delete: bool) -> str:
    """Final or interim summary, e.g. ``Deleted 1.2 GB of virtualenvs``."""
    verb = "Deleted" if delete else "Found"
    return f"{verb} {bytes_to_human(total_bytes)} of virtualenvs"


def install_interrupt_handler(
    total: RunningTotal,
    delete: bool,
    exit_func: ExitFunc = os._exit,
) -> Callable[[int, object], None]:
    """Register a SIGINT handler reporting *total* before terminating.

    The process ends through *exit_func* (``os._exit`` by default) so
    nothing after the interrupt runs: an in-flight prompt or deletion is
    abandoned and the reported total only covers deletions that finished.

    Returns:
        The installed handler.
    """

    def _on_interrupt(signum: int, frame: object) -> None:
        try:
            print("Received Ctrl+C, exiting...", file=sys.stderr)
            print(summary_line(total.value, delete), file=sys.stderr)
            sys.stdout.flush()
            sys.stderr.flush()
        except (OSError, RuntimeError):
            # stream was mid-write when the signal arrived
            pass
        exit_func(0)

    signal.signal(signal.SIGINT, _on_interrupt)
    log.debug("Installed SIGINT handler")
    return _on_interrupt
