"""Terminal capability detection from the process environment.

The detectors only need two answers from the outside world: how many colors the
terminal can show, and whether its background is dark. Anything that can answer
those two questions satisfies CapabilityOracle; EnvironmentOracle answers them
from environment variables and the output stream.

Profile detection order:
- NO_COLOR (or CLICOLOR=0 without a force flag) disables color entirely
- COLORTERM / TERM decide the depth when the stream is a tty
- CLICOLOR_FORCE lifts a colorless result to ANSI
"""

import colorsys
import logging
import os
import sys
from typing import Mapping, Optional, Protocol, TextIO

from rich.color import Color

from .profile import Profile

logger = logging.getLogger(__name__)

# TERM values of terminals known to render 24-bit color
TRUECOLOR_TERMS = frozenset({
    "alacritty",
    "contour",
    "foot",
    "rio",
    "wezterm",
    "xterm-ghostty",
    "xterm-kitty",
})


class CapabilityOracle(Protocol):
    """Source of raw terminal capability signals."""

    def color_profile(self) -> Profile:
        ...

    def has_dark_background(self) -> bool:
        ...


class EnvironmentOracle:
    """Reads capability signals from environment variables and a stream."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None):
        self._environ = os.environ if environ is None else environ
        self._stream = sys.stdout if stream is None else stream

    def _get(self, key: str) -> str:
        return self._environ.get(key, "")

    def _is_tty(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        if isatty is None:
            return False
        try:
            return bool(isatty())
        except ValueError:
            # Closed stream
            return False

    def _color_forced(self) -> bool:
        force = self._get("CLICOLOR_FORCE")
        return force != "" and force != "0"

    def _color_disabled(self) -> bool:
        if self._get("NO_COLOR"):
            return True
        return self._get("CLICOLOR") == "0" and not self._color_forced()

    def _terminal_profile(self) -> Profile:
        if not self._is_tty():
            return Profile.NO_COLOR

        term = self._get("TERM").lower()
        colorterm = self._get("COLORTERM").lower()

        if colorterm in ("truecolor", "24bit"):
            # GNU screen drops 24-bit escapes unless running under tmux
            if term.startswith("screen") and self._get("TERM_PROGRAM") != "tmux":
                return Profile.ANSI256
            return Profile.TRUE_COLOR
        if colorterm in ("yes", "true"):
            return Profile.ANSI256

        if term in TRUECOLOR_TERMS:
            return Profile.TRUE_COLOR
        if term == "linux":
            return Profile.ANSI
        if "256color" in term:
            return Profile.ANSI256
        if "color" in term or "ansi" in term:
            return Profile.ANSI
        return Profile.NO_COLOR

    def color_profile(self) -> Profile:
        """Detect the color profile of the attached terminal."""
        if self._color_disabled():
            return Profile.NO_COLOR
        profile = self._terminal_profile()
        if profile == Profile.NO_COLOR and self._color_forced():
            return Profile.ANSI
        return profile

    def has_dark_background(self) -> bool:
        """
        Guess whether the terminal background is dark.

        Uses the background palette index from COLORFGBG. Without a usable
        signal the background is assumed to be black, so this returns True.
        """
        index = _background_index(self._get("COLORFGBG"))
        if index is None:
            return True
        triplet = Color.from_ansi(index).get_truecolor()
        _, lightness, _ = colorsys.rgb_to_hls(
            triplet.red / 255, triplet.green / 255, triplet.blue / 255
        )
        return lightness < 0.5


def _background_index(colorfgbg: str) -> Optional[int]:
    """Palette index of the background from a COLORFGBG value like '15;0'."""
    if not colorfgbg:
        return None
    last = colorfgbg.split(";")[-1].strip()
    try:
        index = int(last)
    except ValueError:
        logger.debug(f"Ignoring malformed COLORFGBG value: {colorfgbg!r}")
        return None
    if not 0 <= index <= 255:
        return None
    return index
