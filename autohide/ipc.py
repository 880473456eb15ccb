"""Queries against the compositor's control socket."""

from __future__ import annotations

import itertools
import logging
import os
import re
import socket
from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

_I16_MIN = -32768
_I16_MAX = 32767
_NUMBER = re.compile(r"[+-]?[0-9]+")

_WINDOWS_LINE = 2
_FULLSCREEN_LINE = 15


class IPCConnectionError(RuntimeError):
    """The control socket could not be located or reached."""


def socket_path(environ: Mapping[str, str] | None = None) -> str:
    """Return the path of the compositor's control socket."""
    env = os.environ if environ is None else environ
    signature = env.get("HYPRLAND_INSTANCE_SIGNATURE")
    if signature is None:
        raise IPCConnectionError(
            "Could not retrieve Hyprland's signature: "
            "HYPRLAND_INSTANCE_SIGNATURE is not set"
        )
    runtime_dir = env.get("XDG_RUNTIME_DIR")
    if runtime_dir is not None:
        return f"{runtime_dir}/hypr/{signature}/.socket.sock"
    return f"/tmp/hypr/{signature}/.socket.sock"


def request(path: str | os.PathLike[str], command: str) -> str:
    """Send one command over the socket and return the whole reply."""
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        try:
            sock.connect(os.fspath(path))
        except OSError as exc:
            raise IPCConnectionError(f"Could not connect to the socket {path}") from exc
        sock.sendall(command.encode("ascii"))
        chunks = []
        while chunk := sock.recv(4096):
            chunks.append(chunk)
    return b"".join(chunks).decode("utf-8")


def _parse_i16(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid number: {text!r}")
    value = int(text)
    if not _I16_MIN <= value <= _I16_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _line_number(reply: str, index: int, what: str) -> int:
    lines = reply.split("\n")
    if len(lines) <= index:
        raise ValueError(f"Could not retrieve {what} from the reply")
    digits = "".join(itertools.dropwhile(lambda c: not c.isnumeric(), lines[index]))
    return _parse_i16(digits.strip())


def parse_cursor_y(reply: str) -> int:
    """Extract the Y coordinate from a ``cursorpos`` reply."""
    fields = reply.split(",")
    if len(fields) < 2:
        raise ValueError("Could not retrieve the Y value from the reply")
    return _parse_i16(fields[1].strip())


def parse_workspace_windows(reply: str) -> int:
    """Extract the window count from an ``activeworkspace`` reply."""
    return _line_number(reply, _WINDOWS_LINE, "the number of active windows")


def parse_fullscreen(reply: str) -> int:
    """Extract the fullscreen state from an ``activewindow`` reply."""
    return _line_number(reply, _FULLSCREEN_LINE, "the fullscreen information")


def _query(path: str | os.PathLike[str], command: str, parser: Callable[[str], int]) -> int:
    try:
        reply = request(path, command)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Data exchange over socket failed: %s", exc)
        return 0
    try:
        return parser(reply)
    except ValueError as exc:
        logger.error("Could not parse the reply to %r: %s", command, exc)
        return 0


def get_pos(path: str | os.PathLike[str]) -> int:
    """Return the cursor's current Y position, or 0 if it cannot be read."""
    return _query(path, "cursorpos", parse_cursor_y)


def get_workspace_windows(path: str | os.PathLike[str]) -> int:
    """Return the number of windows on the active workspace, or 0."""
    return _query(path, "activeworkspace", parse_workspace_windows)


def get_windows_fullscreen(path: str | os.PathLike[str]) -> int:
    """Return the fullscreen state of the active window, or 0."""
    return _query(path, "activewindow", parse_fullscreen)