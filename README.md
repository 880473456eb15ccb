# autohide

This tool keeps Waybar hidden while you work on Hyprland. To bring the bar back,
move the mouse cursor quickly up to the top edge of the screen. The bar stays
visible while the cursor is near the top. It hides again once the cursor moves
away.

autohide hides and shows the bar by sending `SIGUSR1` to the Waybar process,
which it finds by name. It reads the cursor position and the window state from
Hyprland's IPC socket. The socket is
`$XDG_RUNTIME_DIR/hypr/$HYPRLAND_INSTANCE_SIGNATURE/.socket.sock`. If
`XDG_RUNTIME_DIR` is not set, the path starts with `/tmp/hypr/` instead.

## Installation

```
pip install .
```

## Commands

- `autohide` reveals the bar when the cursor is flicked to the top. If the
  workspace has windows and the active window is fullscreen, the bar is not
  revealed.
- `autohide_wd` behaves the same way. In addition, it shows the bar for as
  long as the current workspace has no windows.

On startup, both commands hide the bar and then keep polling until they are
interrupted. Start one of the two from your Hyprland configuration, for example:

```
exec-once = autohide
```

Messages are written to standard error. A command exits with status 1 in any
of these cases:

- an option value is invalid or missing;
- `HYPRLAND_INSTANCE_SIGNATURE` is not set;
- the socket cannot be reached;
- the process cannot be found or signalled.

A command interrupted with Ctrl-C exits with status 130. If a reply from the
socket cannot be read or parsed, the command logs it, counts the value as 0
and keeps running.

## Options

Both commands accept the same options. Arguments they do not recognise are
ignored.

| Option | Default | Meaning |
| --- | --- | --- |
| `--name NAME` | `waybar` | Name of the process to signal |
| `--max-retry N` | `5` | How many more times to look for the process if it is not found (-128 to 127) |
| `--retry-delay SECONDS` | `5` | Seconds to wait between searches (0 to 255) |
| `--sleep-time MS` | `50` | Polling interval in milliseconds |
| `--vel-threshhold PX` | `50` | Upward movement per poll needed to reveal the bar; `--vel-threshold` is accepted too |
| `--pos-threshold PX` | `60` | The bar is revealed only when the cursor's Y position is below this value |

The velocity is measured per polling interval. If you change `--sleep-time`,
you may also need to change `--vel-threshhold`.

## Library use

You can also use the modules directly from Python:

- `autohide.ipc` queries the socket. It provides `socket_path`, `request`,
  `get_pos`, `get_workspace_windows` and `get_windows_fullscreen`, and the
  reply parsers `parse_cursor_y`, `parse_workspace_windows` and
  `parse_fullscreen`.
- `autohide.process` provides `find_pid`, `wait_for_pid` and `toggle_waybar`.
- `autohide.config.parse_args` builds a `Settings` object.
- `autohide.daemon.Controller` and
  `autohide.window_detect.WindowDetectController` run the polling loop.

## Development

```
pip install -e ".[test]"
pytest
```