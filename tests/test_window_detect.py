import os
import signal
import socketserver
import tempfile
import threading
from collections import defaultdict, deque

import pytest

from autohide.config import Settings
from autohide.window_detect import WindowDetectController, main

WS_TEMPLATE = "workspace ID 2 (2) on monitor HDMI-A-1:\n\tmonitorID: 1\n\twindows: %d\n"
WIN_TEMPLATE = "\n".join("\tkey: v" for _ in range(15)) + "\n\tfullscreen: %d\n\tfloating: 0"


class _Bench:
    """Scripted compositor socket plus a record of SIGUSR1 deliveries."""

    def __init__(self, path):
        self.path = path
        self.queues = defaultdict(lambda: deque([""]))
        self.seen = []
        self.signals = []
        bench = self

        class Handler(socketserver.StreamRequestHandler):
            def handle(self):
                command = self.request.recv(1024).decode()
                bench.seen.append(command)
                queue = bench.queues[command]
                reply = queue.popleft() if len(queue) > 1 else queue[0]
                self.wfile.write(reply.encode())

        self.server = socketserver.UnixStreamServer(path, Handler)

    def load(self, command, *replies):
        self.queues[command] = deque(replies)

    def __enter__(self):
        threading.Thread(target=self.server.serve_forever, daemon=True).start()
        self.previous = signal.signal(
            signal.SIGUSR1, lambda signum, frame: self.signals.append(signum)
        )
        return self

    def __exit__(self, *exc):
        signal.signal(signal.SIGUSR1, self.previous)
        self.server.shutdown()
        self.server.server_close()


@pytest.fixture
def bench():
    with tempfile.TemporaryDirectory(prefix="wd") as directory:
        with _Bench(os.path.join(directory, "w.sock")) as active:
            yield active


def _controller(bench):
    return WindowDetectController(
        os.getpid(), bench.path, Settings(sleep_time=0), lambda seconds: None
    )


def test_empty_workspace_shows_bar_until_window_opens(bench):
    bench.load("activeworkspace", WS_TEMPLATE % 0, WS_TEMPLATE % 0, WS_TEMPLATE % 4)
    bench.load("activewindow", WIN_TEMPLATE % 1)
    _controller(bench).step()
    assert bench.signals == [signal.SIGUSR1, signal.SIGUSR1]
    assert bench.seen == ["activeworkspace"] * 3 + ["activewindow"]


@pytest.mark.parametrize(
    "fullscreen, expected_seen, expected_ypos",
    [
        (0, ["activeworkspace", "activewindow", "cursorpos"], 200),
        (1, ["activeworkspace", "activewindow"], 123),
    ],
)
def test_occupied_workspace(bench, fullscreen, expected_seen, expected_ypos):
    bench.load("activeworkspace", WS_TEMPLATE % 3)
    bench.load("activewindow", WIN_TEMPLATE % fullscreen)
    bench.load("cursorpos", "1, 200")
    controller = _controller(bench)
    controller.ypos = 123
    controller.step()
    assert bench.signals == []
    assert bench.seen == expected_seen
    assert controller.ypos == expected_ypos


@pytest.mark.parametrize(
    "environ, argv",
    [
        ({}, []),
        ({"HYPRLAND_INSTANCE_SIGNATURE": "sig"}, ["--pos-threshold", "high"]),
    ],
)
def test_main_fails(monkeypatch, environ, argv):
    monkeypatch.delenv("HYPRLAND_INSTANCE_SIGNATURE", raising=False)
    for name, value in environ.items():
        monkeypatch.setenv(name, value)
    assert main(argv) == 1