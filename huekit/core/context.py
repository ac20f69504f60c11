"""Color context: the profile and background detectors that colors resolve against.

Most callers never build one. Colors resolve against a process-wide default
context, created on first use and pinned by any HUEKIT_* environment settings.
Build a ColorContext directly for isolated tests or for rendering to a
different terminal than the one the process is attached to.
"""

import threading
from dataclasses import dataclass, field
from typing import Optional

from ..config import ColorConfig
from .detector import BackgroundDetector, ProfileDetector
from .oracle import CapabilityOracle
from .profile import Profile


@dataclass
class ColorContext:
    """Pair of detectors answering "which profile?" and "dark background?"."""
    profiles: ProfileDetector = field(default_factory=ProfileDetector)
    backgrounds: BackgroundDetector = field(default_factory=BackgroundDetector)

    @classmethod
    def from_oracle(cls, oracle: CapabilityOracle) -> "ColorContext":
        return cls(profiles=ProfileDetector(oracle), backgrounds=BackgroundDetector(oracle))

    @classmethod
    def from_config(cls, config: ColorConfig, oracle: Optional[CapabilityOracle] = None) -> "ColorContext":
        ctx = cls.from_oracle(oracle) if oracle is not None else cls()
        config.apply(ctx)
        return ctx

    @property
    def profile(self) -> Profile:
        return self.profiles.get_profile()

    @property
    def dark(self) -> bool:
        return self.backgrounds.has_dark_background()


# Global instance for singleton access
_default_context: Optional[ColorContext] = None
_default_lock = threading.Lock()


def get_default_context() -> ColorContext:
    """Get or create the process-wide ColorContext."""
    global _default_context
    if _default_context is None:
        with _default_lock:
            if _default_context is None:
                _default_context = ColorContext.from_config(ColorConfig.from_env())
    return _default_context


def reset_default_context() -> None:
    """Drop the process-wide context so the next use detects again (for testing)."""
    global _default_context
    with _default_lock:
        _default_context = None


def color_profile() -> Profile:
    """
    Return the terminal's color profile, detecting it once per process.
    """
    return get_default_context().profile


def set_color_profile(profile: Profile) -> None:
    """
    Pin the process-wide color profile.

    Mostly useful in tests, to render against a known profile. Outside tests
    color_profile() already picks the best profile the terminal supports.
    Thread-safe.
    """
    get_default_context().profiles.set_profile(profile)


def has_dark_background() -> bool:
    """Return whether the terminal background is dark, detecting it once per process."""
    return get_default_context().dark


def set_has_dark_background(dark: bool) -> None:
    """
    Pin the process-wide background darkness.

    Like set_color_profile(), this exists mostly for tests. Thread-safe.
    """
    get_default_context().backgrounds.set_has_dark_background(dark)
