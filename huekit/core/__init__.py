"""Core color resolution - profiles, detection, color-space glue, and terminal colors."""

# isort: skip_file
# Import order matters: context pulls in huekit.config, which needs profile loaded first.

from .profile import Profile
from .oracle import CapabilityOracle, EnvironmentOracle
from .detector import (
    BackgroundDetector,
    Detector,
    DetectorPhase,
    DetectorState,
    ProfileDetector,
)
from .context import (
    ColorContext,
    color_profile,
    get_default_context,
    has_dark_background,
    reset_default_context,
    set_color_profile,
    set_has_dark_background,
)
from .colorspace import RGBA, parse_color, resolve, to_rgba
from .blend import blend_hex
from .colors import (
    AdaptiveColor,
    Color,
    ColorDescriptor,
    CompleteAdaptiveColor,
    CompleteColor,
    GradientColor,
    NoColor,
    TerminalColor,
)

__all__ = [
    # Profiles
    "Profile",
    # Detection
    "CapabilityOracle",
    "EnvironmentOracle",
    "Detector",
    "DetectorPhase",
    "DetectorState",
    "ProfileDetector",
    "BackgroundDetector",
    # Context
    "ColorContext",
    "get_default_context",
    "reset_default_context",
    "color_profile",
    "set_color_profile",
    "has_dark_background",
    "set_has_dark_background",
    # Color space
    "RGBA",
    "parse_color",
    "resolve",
    "to_rgba",
    "blend_hex",
    # Colors
    "TerminalColor",
    "ColorDescriptor",
    "NoColor",
    "Color",
    "AdaptiveColor",
    "CompleteColor",
    "CompleteAdaptiveColor",
    "GradientColor",
]
