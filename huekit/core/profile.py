"""Terminal color profiles, ordered by capability."""

from enum import IntEnum
from typing import Optional

from rich.color import ColorSystem


class Profile(IntEnum):
    """Color depth a terminal supports. Higher values render more colors."""
    NO_COLOR = 0     # 1-bit, no color escapes at all
    ANSI = 1         # 4-bit, 16 colors
    ANSI256 = 2      # 8-bit, 256 colors
    TRUE_COLOR = 3   # 24-bit, 16,777,216 colors

    @property
    def color_system(self) -> Optional[ColorSystem]:
        """The rich color system colors are degraded to, None for NO_COLOR."""
        return _COLOR_SYSTEMS.get(self)

    @classmethod
    def from_name(cls, name: str) -> "Profile":
        """
        Parse a profile from a user-facing name.

        Accepts member names and common aliases ("truecolor", "256", "ascii", ...).

        Raises:
            ValueError: if the name is not a known profile
        """
        key = name.strip().lower().replace("-", "_")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown color profile: {name!r}") from None


_COLOR_SYSTEMS = {
    Profile.ANSI: ColorSystem.STANDARD,
    Profile.ANSI256: ColorSystem.EIGHT_BIT,
    Profile.TRUE_COLOR: ColorSystem.TRUECOLOR,
}

_ALIASES = {
    "no_color": Profile.NO_COLOR,
    "nocolor": Profile.NO_COLOR,
    "none": Profile.NO_COLOR,
    "ascii": Profile.NO_COLOR,
    "ansi": Profile.ANSI,
    "16": Profile.ANSI,
    "4bit": Profile.ANSI,
    "ansi256": Profile.ANSI256,
    "256": Profile.ANSI256,
    "8bit": Profile.ANSI256,
    "true_color": Profile.TRUE_COLOR,
    "truecolor": Profile.TRUE_COLOR,
    "24bit": Profile.TRUE_COLOR,
}
