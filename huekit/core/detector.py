"""Detect-once caches for terminal capabilities, with explicit overrides.

A detector starts unresolved. The first get() runs detection exactly once,
even when many threads arrive at the same time, and caches the result. An
explicit set() pins the value; detection never runs again until reset().

State is one immutable DetectorState swapped under a lock, so readers never
lock against each other and always see a complete (value, explicit) pair.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from .oracle import CapabilityOracle, EnvironmentOracle
from .profile import Profile

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DetectorPhase(Enum):
    """Lifecycle of a detector's cached value."""
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"  # filled in by detection
    FORCED = "forced"      # pinned by an explicit set


@dataclass(frozen=True)
class DetectorState(Generic[T]):
    """Cached detector value and whether it was set explicitly."""
    value: T
    explicit: bool = False


class Detector(Generic[T]):
    """
    Thread-safe, detect-once cache for a single capability value.

    Args:
        detect: Zero-argument callable producing the value
        default: Value cached when detect raises
        name: Label used in log records
    """

    def __init__(self, detect: Callable[[], T], default: T, name: str = "value"):
        self._detect = detect
        self._default = default
        self._name = name
        self._state: Optional[DetectorState[T]] = None
        self._lock = threading.Lock()

    def get(self) -> T:
        """Return the cached value, running detection on first use."""
        state = self._state
        if state is None:
            with self._lock:
                state = self._state
                if state is None:
                    state = DetectorState(self._run_detection())
                    self._state = state
        return state.value

    def set(self, value: T) -> None:
        """Pin the value. Later get() calls return it without detecting."""
        with self._lock:
            self._state = DetectorState(value, explicit=True)
        logger.debug(f"{self._name} set explicitly to {value!r}")

    def reset(self) -> None:
        """Forget any cached or pinned value. Meant for tests."""
        with self._lock:
            self._state = None

    @property
    def explicit(self) -> bool:
        """Whether the current value was pinned with set()."""
        state = self._state
        return state is not None and state.explicit

    @property
    def phase(self) -> DetectorPhase:
        state = self._state
        if state is None:
            return DetectorPhase.UNRESOLVED
        if state.explicit:
            return DetectorPhase.FORCED
        return DetectorPhase.RESOLVED

    def _run_detection(self) -> T:
        try:
            value = self._detect()
        except Exception as e:
            logger.warning(f"{self._name} detection failed, using {self._default!r}: {e}")
            return self._default
        logger.debug(f"Detected {self._name}: {value!r}")
        return value


class ProfileDetector(Detector[Profile]):
    """Caches the terminal color profile. Falls back to NO_COLOR."""

    def __init__(self, oracle: Optional[CapabilityOracle] = None):
        oracle = oracle or EnvironmentOracle()
        super().__init__(oracle.color_profile, Profile.NO_COLOR, name="color profile")

    def get_profile(self) -> Profile:
        return self.get()

    def set_profile(self, profile: Profile) -> None:
        self.set(Profile(profile))


class BackgroundDetector(Detector[bool]):
    """Caches whether the terminal background is dark. Falls back to True."""

    def __init__(self, oracle: Optional[CapabilityOracle] = None):
        oracle = oracle or EnvironmentOracle()
        super().__init__(oracle.has_dark_background, True, name="dark background")

    def has_dark_background(self) -> bool:
        return self.get()

    def set_has_dark_background(self, dark: bool) -> None:
        self.set(bool(dark))
