"""Locating the bar process and signalling it."""

from __future__ import annotations

import logging
import os
import signal
import time
from collections.abc import Callable

import psutil

logger = logging.getLogger(__name__)


class SignalError(RuntimeError):
    """The toggle signal could not be delivered."""


def find_pid(name: str) -> int | None:
    """Return the PID of a process called ``name``, or None."""
    for proc in psutil.process_iter(["name"]):
        if proc.info.get("name") == name:
            return proc.pid
    logger.warning("Could not find a process named [%s]", name)
    return None


def toggle_waybar(pid: int) -> None:
    """Ask the bar to show or hide itself."""
    try:
        os.kill(pid, signal.SIGUSR1)
    except OSError as exc:
        raise SignalError("The signal could not be sent! Is Waybar still open?") from exc


def wait_for_pid(
    name: str,
    max_retry: int,
    retry_delay: float,
    sleep: Callable[[float], object] = time.sleep,
) -> int:
    """Look for the process, retrying up to ``max_retry`` times."""
    pid = find_pid(name)
    tries = 0
    while pid is None and tries < max_retry:
        logger.warning(
            "Waybar process could not be found! Searching again in %s seconds. "
            "[%d] tries left.",
            retry_delay,
            max_retry - tries,
        )
        sleep(retry_delay)
        pid = find_pid(name)
        tries += 1
    if pid is None:
        raise ProcessLookupError(
            f"The Waybar process could not be found after [{max_retry + 1}] tries!"
        )
    return pid