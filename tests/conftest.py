"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from huekit.config import ENV_DARK_BACKGROUND, ENV_PROFILE, ColorConfig
from huekit.core.context import ColorContext, reset_default_context
from huekit.core.profile import Profile


@pytest.fixture(autouse=True)
def isolated_default_context(monkeypatch):
    """Every test starts with an undetected process-wide context and no env pins."""
    monkeypatch.delenv(ENV_PROFILE, raising=False)
    monkeypatch.delenv(ENV_DARK_BACKGROUND, raising=False)
    reset_default_context()
    yield
    reset_default_context()


@pytest.fixture
def make_context():
    """Factory for contexts pinned to a profile and background."""
    def _make(profile: Profile = Profile.TRUE_COLOR, dark: bool = True) -> ColorContext:
        return ColorContext.from_config(ColorConfig(profile=profile, dark_background=dark))
    return _make


@pytest.fixture
def oracle():
    """Capability oracle reporting a true color terminal with a dark background."""
    mock = MagicMock()
    mock.color_profile.return_value = Profile.TRUE_COLOR
    mock.has_dark_background.return_value = True
    return mock


@pytest.fixture
def tty():
    """Output stream that claims to be a terminal."""
    stream = MagicMock()
    stream.isatty.return_value = True
    return stream
