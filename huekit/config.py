"""Optional pins for color detection, from a dict, the environment, or a JSON file."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Optional

from .core.profile import Profile

if TYPE_CHECKING:
    from .core.context import ColorContext

logger = logging.getLogger(__name__)

ENV_PROFILE = "HUEKIT_COLOR_PROFILE"
ENV_DARK_BACKGROUND = "HUEKIT_DARK_BACKGROUND"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _parse_profile(value) -> Optional[Profile]:
    if value is None or isinstance(value, Profile):
        return value
    try:
        if isinstance(value, int) and not isinstance(value, bool):
            return Profile(value)
        return Profile.from_name(str(value))
    except ValueError:
        logger.warning(f"Ignoring invalid color profile: {value!r}")
        return None


def _parse_bool(value) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    logger.warning(f"Ignoring invalid dark background flag: {value!r}")
    return None


@dataclass
class ColorConfig:
    """Detection pins. None means "detect from the terminal"."""
    profile: Optional[Profile] = None
    dark_background: Optional[bool] = None

    def to_dict(self) -> dict:
        d = {}
        if self.profile is not None:
            d["profile"] = self.profile.name.lower()
        if self.dark_background is not None:
            d["dark_background"] = self.dark_background
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "ColorConfig":
        if not isinstance(d, dict):
            return cls()
        return cls(
            profile=_parse_profile(d.get("profile")),
            dark_background=_parse_bool(d.get("dark_background")),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ColorConfig":
        """Read pins from HUEKIT_COLOR_PROFILE and HUEKIT_DARK_BACKGROUND."""
        environ = os.environ if environ is None else environ
        return cls(
            profile=_parse_profile(environ.get(ENV_PROFILE) or None),
            dark_background=_parse_bool(environ.get(ENV_DARK_BACKGROUND) or None),
        )

    def save(self, path: Path):
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        temp.rename(path)

    @classmethod
    def load(cls, path: Path) -> "ColorConfig":
        try:
            if path.exists():
                return cls.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (ValueError, OSError) as e:
            logger.warning(f"Could not read color config {path}: {e}")
        return cls()

    def apply(self, ctx: "ColorContext") -> None:
        """Pin the context's detectors for every value set here."""
        if self.profile is not None:
            ctx.profiles.set_profile(self.profile)
        if self.dark_background is not None:
            ctx.backgrounds.set_has_dark_background(self.dark_background)
