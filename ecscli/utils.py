"""Small helpers shared across the package: home directory lookup and sleepers."""

from __future__ import annotations

import os
import time
from abc import ABC, abstractmethod


class Sleeper(ABC):
    """Something that can pause for a while; swapped out in tests of wait loops."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Pause for the given number of seconds."""


class TimeSleeper(Sleeper):
    """Sleeper backed by :func:`time.sleep`."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)


def get_home_dir() -> str:
    """Return the user's home directory from ``HOME`` or, failing that, ``USERPROFILE``.

    Raises RuntimeError when neither variable is set.
    """
    home_dir = os.environ.get("HOME", "") or os.environ.get("USERPROFILE", "")
    if not home_dir:
        raise RuntimeError("user home directory not found")
    return home_dir