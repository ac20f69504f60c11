"""huekit - terminal color resolution for adaptive, profile-aware styling."""

# isort: skip_file
# core must load before config (config imports core.profile).

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .config import ColorConfig

__version__ = "0.1.0"

__all__ = [*_core_all, "ColorConfig"]
