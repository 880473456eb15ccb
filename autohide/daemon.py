"""Reveal the bar when the cursor is flicked to the top of the screen."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Sequence

from autohide import ipc, process
from autohide.config import Settings, parse_args
from autohide.ipc import IPCConnectionError
from autohide.process import SignalError

logger = logging.getLogger(__name__)


class Controller:
    """Watches the cursor and toggles the bar while it stays near the top."""

    def __init__(
        self,
        pid: int,
        path: str,
        settings: Settings,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.pid = pid
        self.path = path
        self.settings = settings
        self.sleep = sleep
        self.ypos = 0

    def _pause(self) -> None:
        self.sleep(self.settings.sleep_time / 1000)

    def check_cursor(self) -> bool:
        """Show the bar while a fast upward move keeps the cursor at the top.

        Returns True if the bar was revealed.
        """
        new_ypos = ipc.get_pos(self.path)
        velocity = self.ypos - new_ypos
        threshold = self.settings.pos_threshold
        revealed = velocity > self.settings.vel_threshold and new_ypos < threshold
        if revealed:
            process.toggle_waybar(self.pid)
            while new_ypos < threshold:
                new_ypos = ipc.get_pos(self.path)
                self._pause()
            process.toggle_waybar(self.pid)
        self.ypos = new_ypos
        return revealed

    def step(self) -> None:
        """One pass: skip the cursor check over a fullscreen window."""
        windows = ipc.get_workspace_windows(self.path)
        if windows > 0:
            if ipc.get_windows_fullscreen(self.path) == 0:
                self.check_cursor()
        else:
            self.check_cursor()

    def run(self) -> None:
        """Hide the bar and keep watching until interrupted."""
        process.toggle_waybar(self.pid)
        self.ypos = ipc.get_pos(self.path)
        while True:
            self.step()
            self._pause()


def _launch(argv: Sequence[str] | None, controller_class: type[Controller]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        settings = parse_args(argv)
        path = ipc.socket_path()
        pid = process.wait_for_pid(
            settings.process_name, settings.max_retry, settings.retry_delay
        )
        controller_class(pid, path, settings).run()
    except (ValueError, IPCConnectionError, SignalError, ProcessLookupError) as exc:
        logger.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the cursor-driven bar toggler."""
    return _launch(argv, Controller)


if __name__ == "__main__":
    sys.exit(main())