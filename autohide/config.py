"""Command-line settings."""

from __future__ import annotations

import itertools
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

_NUMBER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Settings:
    """Tunables for the hide/show loop. Times are in ms, delays in s."""

    sleep_time: int = 50
    vel_threshold: int = 50
    pos_threshold: int = 60
    max_retry: int = 5
    retry_delay: int = 5
    process_name: str = "waybar"


_NUMERIC_FLAGS = {
    "--max-retry": ("max_retry", -128, 127),
    "--sleep-time": ("sleep_time", 0, 2**32 - 1),
    "--vel-threshhold": ("vel_threshold", -32768, 32767),
    "--vel-threshold": ("vel_threshold", -32768, 32767),
    "--pos-threshold": ("pos_threshold", -32768, 32767),
    "--retry-delay": ("retry_delay", 0, 255),
}


def _parse_int(flag: str, text: str, low: int, high: int) -> int:
    valid = _NUMBER.fullmatch(text) and not (low >= 0 and text.startswith("-"))
    if valid:
        value = int(text)
        if low <= value <= high:
            return value
    raise ValueError(f'Invalid number after "{flag}": {text!r}')


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    """Build settings from command-line arguments; unknown words are ignored."""
    args = list(sys.argv[1:] if argv is None else argv)
    values: dict[str, object] = {}
    for flag, value in itertools.zip_longest(args, args[1:]):
        if flag != "--name" and flag not in _NUMERIC_FLAGS:
            continue
        if value is None:
            raise ValueError(f'Missing value after "{flag}"')
        if flag == "--name":
            values["process_name"] = value
        else:
            field, low, high = _NUMERIC_FLAGS[flag]
            values[field] = _parse_int(flag, value, low, high)
    return Settings(**values)