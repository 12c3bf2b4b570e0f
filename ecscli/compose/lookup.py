"""Lookups of referenced files and of environment variables for compose services."""

from __future__ import annotations

import logging
import os
import posixpath
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .types import ServiceConfig

_log = logging.getLogger(__name__)


class ConfigLookup(ABC):
    """Loads a file that a compose file refers to."""

    @abstractmethod
    def lookup(self, file: str, relative_to: str) -> tuple[bytes, str]:
        """Return the content of ``file`` and the name it was read from."""


class EnvironmentLookup(ABC):
    """Resolves an environment variable for a service."""

    @abstractmethod
    def lookup(
        self, key: str, service_name: str, config: Optional["ServiceConfig"]
    ) -> list[str]:
        """Return ``key=value`` entries for ``key``; empty when it is not set."""


def _join(*elements: str) -> str:
    joined = posixpath.join(*(element for element in elements if element))
    return posixpath.normpath(joined) if joined else ""


class FileConfigLookup(ConfigLookup):
    """Reads files from disk, relative to the directory of the referring file."""

    def lookup(self, file: str, relative_to: str) -> tuple[bytes, str]:
        """Read ``file``; a path not starting with '/' is taken relative to ``relative_to``.

        Raises OSError when the file cannot be read.
        """
        if file.startswith("/"):
            _log.debug("Reading file %s", file)
            with open(file, "rb") as handle:
                return handle.read(), file

        file_name = _join(posixpath.dirname(relative_to), file)
        _log.debug("Reading file %s relative to %s", file_name, relative_to)
        with open(file_name, "rb") as handle:
            return handle.read(), file_name


class OsEnvLookup(EnvironmentLookup):
    """Takes values from the process environment; service and config are ignored."""

    def lookup(
        self, key: str, service_name: str, config: Optional["ServiceConfig"]
    ) -> list[str]:
        value = os.environ.get(key, "")
        if not value:
            return []
        return [f"{key}={value}"]