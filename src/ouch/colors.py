"""Terminal color palettes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from .constants import (
    COLOR_MODE_ALWAYS,
    COLOR_MODE_ENV_VAR,
    COLOR_MODE_NEVER,
    NO_COLOR_ENV_VAR,
)


@dataclass(frozen=True, slots=True)
class Palette:
    red: str
    green: str
    magenta: str
    reset: str


ANSI = Palette(
    red="\033[31m",
    green="\033[32m",
    magenta="\033[35m",
    reset="\033[39m",
)
PLAIN = Palette(red="", green="", magenta="", reset="")


def palette_for_stream(
    stream: TextIO, environ: Mapping[str, str] | None = None
) -> Palette:
    """Pick ANSI colors for terminals and plain text for everything else.

    ``OUCH_COLOR=always|never`` overrides detection; ``NO_COLOR`` disables
    colors unless forced.
    """
    env = os.environ if environ is None else environ

    mode = env.get(COLOR_MODE_ENV_VAR, "").strip().lower()
    if mode == COLOR_MODE_ALWAYS:
        return ANSI
    if mode == COLOR_MODE_NEVER:
        return PLAIN
    if NO_COLOR_ENV_VAR in env:
        return PLAIN

    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return PLAIN
    try:
        return ANSI if isatty() else PLAIN
    except ValueError:
        # Closed stream.
        return PLAIN
