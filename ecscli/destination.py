"""Location of the tool's configuration directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .utils import get_home_dir

_log = logging.getLogger(__name__)

_CONFIG_DIR_NAME = ".ecs"


@dataclass
class Destination:
    """Where the config is written, and the mode to create its directory with."""

    path: str
    mode: Optional[int] = None


def get_file_permissions(file_name: str) -> int:
    """Return the ``st_mode`` of a file; errors from stat are logged and re-raised."""
    try:
        return os.stat(file_name).st_mode
    except OSError:
        _log.warning("Error getting permissions of file: %s", file_name)
        raise


def default_destination() -> Destination:
    """Return the config destination ``~/.ecs`` with the home directory's mode."""
    home_dir = get_home_dir()
    mode = get_file_permissions(home_dir)
    return Destination(path=os.path.join(home_dir, _CONFIG_DIR_NAME), mode=mode)