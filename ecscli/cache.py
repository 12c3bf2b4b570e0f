"""A simple key-value cache, with a filesystem store and a no-op store.

The filesystem store keeps its files under ``~/.cache/ecs-cli/<name>``.
"""

from __future__ import annotations

import os
import pickle
from abc import ABC, abstractmethod
from typing import Any

from .utils import get_home_dir

# User-only: cached values may hold sensitive data taken from the environment.
_CACHE_DIR_MODE = 0o700
_CACHE_PREFIX = "ecs-cli"


class CacheMissError(LookupError):
    """Raised when a value cannot be read back from a cache."""


class Cache(ABC):
    """Interface of a key-value cache."""

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under ``key``."""


def cache_dir(name: str) -> str:
    """Return the cache directory for the given name."""
    return os.path.join(get_home_dir(), ".cache", _CACHE_PREFIX, name)


class FSCache(Cache):
    """Cache backed by one file per key on disk.

    ``name`` should stay constant so that the same data is found between uses.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.cache_dir = cache_dir(name)
        os.makedirs(self.cache_dir, mode=_CACHE_DIR_MODE, exist_ok=True)

    def _path(self, key: str) -> str:
        return os.path.join(self.cache_dir, key)

    def put(self, key: str, value: Any) -> None:
        with open(self._path(key), "wb") as handle:
            pickle.dump(value, handle)

    def get(self, key: str) -> Any:
        try:
            with open(self._path(key), "rb") as handle:
                return pickle.load(handle)
        except FileNotFoundError as exc:
            raise CacheMissError(f"no cached value for {key!r}") from exc


class NoopCache(Cache):
    """Cache that stores nothing and never finds anything."""

    def put(self, key: str, value: Any) -> None:
        return None

    def get(self, key: str) -> Any:
        raise CacheMissError("noop cache")