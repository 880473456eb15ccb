"""Variant that also reveals the bar on an empty workspace."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from autohide import ipc, process
from autohide.daemon import Controller, _launch


class WindowDetectController(Controller):
    """Keeps the bar visible while the workspace has no windows."""

    def step(self) -> None:
        """One pass: show the bar on an empty workspace, then check the cursor."""
        windows = ipc.get_workspace_windows(self.path)
        if windows == 0:
            process.toggle_waybar(self.pid)
            while windows == 0:
                windows = ipc.get_workspace_windows(self.path)
                self._pause()
            process.toggle_waybar(self.pid)

        if ipc.get_windows_fullscreen(self.path) == 0:
            self.check_cursor()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the window-aware bar toggler."""
    return _launch(argv, WindowDetectController)


if __name__ == "__main__":
    sys.exit(main())