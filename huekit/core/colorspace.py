"""Color-space glue between color codes, terminal profiles, and RGBA.

Color codes are strings: "#rrggbb", the short "#rgb" form, or a palette index
"0" to "255". Parsing and degradation go through rich's Color, so a 24-bit
color on a 256-color terminal becomes the nearest palette entry, and so on
down to the 16 ANSI colors.
"""

import logging
import re
from typing import NamedTuple, Optional

from rich.color import Color as RichColor
from rich.color import ColorParseError
from rich.color_triplet import ColorTriplet

from .profile import Profile

logger = logging.getLogger(__name__)

BLACK = ColorTriplet(0, 0, 0)

# 8-bit channel -> 16-bit channel (0xff * 0x101 == 0xffff)
_CHANNEL_SCALE = 0x101

# ASCII decimal only; int() would also take "1_0" and non-ASCII digits
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class RGBA(NamedTuple):
    """Color with 16 bits per channel."""
    r: int
    g: int
    b: int
    a: int


OPAQUE_BLACK = RGBA(0, 0, 0, 0xFFFF)


def _expand_hex(code: str) -> str:
    """Expand "#rgb" to "#rrggbb"; other strings pass through lowercased."""
    code = code.lower()
    if len(code) == 4:
        return "#" + "".join(c * 2 for c in code[1:])
    return code


def parse_color(code: str) -> Optional[RichColor]:
    """
    Parse a hex or palette-index color code.

    Returns:
        rich Color, or None if the code is empty or not understood
    """
    code = code.strip() if code else ""
    if not code:
        return None

    if code.startswith("#"):
        try:
            return RichColor.parse(_expand_hex(code))
        except ColorParseError:
            logger.debug(f"Unparseable hex color: {code!r}")
            return None

    if not _INDEX_RE.fullmatch(code):
        logger.debug(f"Unrecognized color code: {code!r}")
        return None
    index = int(code)
    if not 0 <= index <= 255:
        return None
    return RichColor.from_ansi(index)


def resolve(code: str, profile: Profile) -> Optional[RichColor]:
    """
    Resolve a color code to the closest color the profile can show.

    None means "no color": either the profile has none, or the code is empty
    or unparseable. Renderers leave the terminal default in place for None.
    """
    system = profile.color_system
    if system is None:
        return None
    color = parse_color(code)
    if color is None:
        return None
    return color.downgrade(system)


def to_rgb(color: Optional[RichColor]) -> ColorTriplet:
    """8-bit RGB of a resolved color. No color is black."""
    if color is None:
        return BLACK
    return color.get_truecolor()


def to_rgba(color: Optional[RichColor]) -> RGBA:
    """16-bit RGBA of a resolved color. No color is opaque black."""
    if color is None:
        return OPAQUE_BLACK
    r, g, b = to_rgb(color)
    return RGBA(r * _CHANNEL_SCALE, g * _CHANNEL_SCALE, b * _CHANNEL_SCALE, 0xFFFF)


def sgr(color: Optional[RichColor], foreground: bool = True) -> str:
    """ANSI escape sequence selecting the color, or "" for no color."""
    if color is None:
        return ""
    codes = color.get_ansi_codes(foreground=foreground)
    if not codes:
        return ""
    return f"\033[{';'.join(codes)}m"
