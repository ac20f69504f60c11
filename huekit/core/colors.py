"""Terminal colors: abstract color requests resolved against a ColorContext.

Six kinds of color, all immutable:
- NoColor: no styling, the terminal default shows through
- Color: a single hex or palette color, degraded to what the terminal supports
- AdaptiveColor: one color for light backgrounds, another for dark ones
- CompleteColor: exact codes per profile, no automatic degradation
- CompleteAdaptiveColor: CompleteColor per background
- GradientColor: one cell of a start-to-end linear gradient

Each resolves three ways: value() gives the code to render, color() the rich
Color for the active profile, rgba() a 16-bit-per-channel RGBA.

Example:
    title = AdaptiveColor(light="#0000ff", dark="#000099")
    title.ansi_fg()  # escape sequence for the current terminal
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import List, Optional, Union

from rich.color import Color as RichColor

from .blend import blend_hex
from .colorspace import OPAQUE_BLACK, RGBA, resolve, sgr, to_rgba
from .context import ColorContext, get_default_context
from .profile import Profile


class TerminalColor(ABC):
    """
    Base of the six color kinds.

    The set is closed: degradation and blending only know about the kinds
    defined in this module, so subclassing elsewhere is refused.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"{cls.__name__}: TerminalColor cannot be extended outside {__name__}")

    @abstractmethod
    def value(self, ctx: Optional[ColorContext] = None) -> str:
        """Color code to render under the context's profile and background."""

    def color(self, ctx: Optional[ColorContext] = None) -> Optional[RichColor]:
        """Resolved color for the active profile, None for no color."""
        ctx = ctx or get_default_context()
        return resolve(self.value(ctx), ctx.profile)

    def rgba(self, ctx: Optional[ColorContext] = None) -> RGBA:
        """16-bit RGBA of the resolved color. Falls back to opaque black."""
        return to_rgba(self.color(ctx))

    def ansi_fg(self, ctx: Optional[ColorContext] = None) -> str:
        """Foreground escape sequence, "" when nothing should be emitted."""
        return sgr(self.color(ctx), foreground=True)

    def ansi_bg(self, ctx: Optional[ColorContext] = None) -> str:
        """Background escape sequence, "" when nothing should be emitted."""
        return sgr(self.color(ctx), foreground=False)


@dataclass(frozen=True)
class NoColor(TerminalColor):
    """
    Absence of color. Foregrounds use the terminal's default text color and
    backgrounds are not drawn.
    """

    def value(self, ctx: Optional[ColorContext] = None) -> str:
        return ""

    def color(self, ctx: Optional[ColorContext] = None) -> Optional[RichColor]:
        return None

    def rgba(self, ctx: Optional[ColorContext] = None) -> RGBA:
        """Something has to be returned, so no color is opaque black."""
        return OPAQUE_BLACK


@dataclass(frozen=True)
class Color(TerminalColor):
    """
    A color by hex or ANSI palette index.

    Example:
        Color("21")       # palette index
        Color("#0000ff")  # hex
    """
    code: str

    def value(self, ctx: Optional[ColorContext] = None) -> str:
        return self.code


@dataclass(frozen=True)
class AdaptiveColor(TerminalColor):
    """Picks light or dark at render time, based on the terminal background."""
    light: str
    dark: str

    def value(self, ctx: Optional[ColorContext] = None) -> str:
        ctx = ctx or get_default_context()
        return self.dark if ctx.dark else self.light


@dataclass(frozen=True)
class CompleteColor(TerminalColor):
    """
    Exact codes for the true color, ANSI256, and ANSI profiles.

    No automatic degradation: the code for the active profile is used as given.
    """
    true_color: str
    ansi256: str
    ansi: str

    def value(self, ctx: Optional[ColorContext] = None) -> str:
        ctx = ctx or get_default_context()
        return self._for_profile(ctx.profile)

    def _for_profile(self, profile: Profile) -> str:
        if profile == Profile.TRUE_COLOR:
            return self.true_color
        if profile == Profile.ANSI256:
            return self.ansi256
        if profile == Profile.ANSI:
            return self.ansi
        return ""


@dataclass(frozen=True)
class CompleteAdaptiveColor(TerminalColor):
    """CompleteColor with separate choices for light and dark backgrounds."""
    light: CompleteColor
    dark: CompleteColor

    def value(self, ctx: Optional[ColorContext] = None) -> str:
        ctx = ctx or get_default_context()
        chosen = self.dark if ctx.dark else self.light
        return chosen.value(ctx)


@dataclass(frozen=True)
class GradientColor(TerminalColor):
    """
    One cell of a left-to-right gradient between two hex colors.

    steps is the number of cells the gradient spans (the width of the text it
    is applied to) and position the index of this cell. Only single-axis
    gradients are supported.
    """
    start: str
    end: str
    steps: int = 0
    position: int = 0

    def value(self, ctx: Optional[ColorContext] = None) -> str:
        return blend_hex(self.start, self.end, self.steps, self.position)

    def across(self, width: int) -> List["GradientColor"]:
        """Per-cell colors for a span of the given width."""
        return [replace(self, steps=width, position=i) for i in range(max(width, 0))]


ColorDescriptor = Union[
    NoColor,
    Color,
    AdaptiveColor,
    CompleteColor,
    CompleteAdaptiveColor,
    GradientColor,
]
