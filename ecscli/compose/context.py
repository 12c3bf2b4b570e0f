"""Settings for working on a compose project: the compose file and the project name."""

from __future__ import annotations

import logging
import os
import posixpath
import re
import sys
from dataclasses import dataclass, field
from typing import Optional

from .lookup import ConfigLookup, EnvironmentLookup

_log = logging.getLogger(__name__)

_PROJECT_INVALID = re.compile(r"[^a-zA-Z0-9_.-]")


class ProjectNameError(ValueError):
    """Raised when no project name can be determined."""


def to_unix_path(path: str) -> str:
    """Replace every backslash in ``path`` with a forward slash."""
    return path.replace("\\", "/")


def _base(path: str) -> str:
    """Last element of a slash-separated path; '/' for the root, '.' for empty."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


@dataclass
class Context:
    """Configuration needed while setting up and running containers."""

    timeout: int = 0
    log: bool = False
    signal: str = ""
    compose_file: str = ""
    compose_bytes: Optional[bytes] = None
    project_name: str = ""
    environment_lookup: Optional[EnvironmentLookup] = None
    config_lookup: Optional[ConfigLookup] = None
    ignore_missing_config: bool = False
    _is_open: bool = field(default=False, init=False, repr=False, compare=False)

    def _read_compose_file(self) -> None:
        if self.compose_bytes is not None:
            return

        _log.debug("Opening compose file: %s", self.compose_file)

        if self.compose_file == "-":
            try:
                self.compose_bytes = sys.stdin.buffer.read()
            except OSError as exc:
                _log.error("Failed to read compose file from stdin: %s", exc)
                raise
        elif self.compose_file:
            try:
                with open(self.compose_file, "rb") as handle:
                    self.compose_bytes = handle.read()
            except FileNotFoundError:
                if self.ignore_missing_config:
                    return
                _log.error("Failed to find %s", self.compose_file)
                raise
            except OSError:
                _log.error("Failed to open %s", self.compose_file)
                raise

    def _lookup_project_name(self) -> str:
        if self.project_name:
            return self.project_name

        env_project = os.environ.get("COMPOSE_PROJECT_NAME", "")
        if env_project:
            return env_project

        try:
            absolute = os.path.abspath(self.compose_file)
        except OSError:
            _log.error("Failed to get absolute directory for: %s", self.compose_file)
            raise

        parent = _base(posixpath.dirname(absolute))
        if parent and parent != ".":
            return parent
        return _base(to_unix_path(os.getcwd()))

    def _determine_project(self) -> None:
        name = self._lookup_project_name()
        project = _PROJECT_INVALID.sub("-", name.lower())
        if not project:
            raise ProjectNameError("Failed to determine project name")
        if project[0] in "_.-":
            project = "x" + project
        self.project_name = project

    def open(self) -> None:
        """Read the compose file and settle the project name; later calls do nothing."""
        if self._is_open:
            return
        self._read_compose_file()
        self._determine_project()
        self._is_open = True