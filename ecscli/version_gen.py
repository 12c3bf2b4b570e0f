"""Generates the version module from a VERSION file and the state of the git checkout."""

from __future__ import annotations

import argparse
import json
import os
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence

_UNKNOWN = "UNKNOWN"

_TEMPLATE = '''"""Version information for the command line tool.

Generated file: do not edit by hand.
"""

APP_NAME = "ecs-cli"

VERSION = {version}

# Whether the working tree was dirty when this build was made.
GIT_DIRTY = {dirty}

GIT_SHORT_HASH = {hash}


def version_string() -> str:
    """Return a human-readable version such as ``0.3.0 (*abc1234)``."""
    marker = "*" if GIT_DIRTY else ""
    return f"{{VERSION}} ({{marker}}{{GIT_SHORT_HASH}})"
'''


@dataclass
class VersionInfo:
    """Version, cleanliness of the checkout and short commit hash of a build."""

    version: str
    dirty: bool = True
    hash: str = _UNKNOWN


def git_dirty() -> bool:
    """Report the checkout as dirty unless ``git status --porcelain`` runs successfully."""
    try:
        subprocess.run(
            ["git", "status", "--porcelain"],
            check=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return True
    return False


def git_hash() -> str:
    """Return the short hash of HEAD, or ``UNKNOWN`` if git cannot tell."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
        )
    except (OSError, subprocess.CalledProcessError):
        return _UNKNOWN
    return result.stdout.decode("utf-8", errors="replace").strip()


def collect_version_info(version_file: str) -> VersionInfo:
    """Build the version info from ``version_file`` and the environment.

    An unreadable version file gives an empty version. The dirty flag is asked
    of git only when ``ECS_RELEASE`` is ``cleanbuild``; the hash only when
    ``ECS_UNKNOWN_VERSION`` is empty or unset.
    """
    try:
        with open(version_file, encoding="utf-8") as handle:
            version = handle.read().strip()
    except OSError:
        version = ""

    info = VersionInfo(version=version)
    if os.environ.get("ECS_RELEASE", "").strip() == "cleanbuild":
        info.dirty = git_dirty()
    if not os.environ.get("ECS_UNKNOWN_VERSION", ""):
        info.hash = git_hash()
    return info


def render_version_module(info: VersionInfo) -> str:
    """Return the source text of the version module for ``info``."""
    return _TEMPLATE.format(
        version=json.dumps(info.version),
        dirty="True" if info.dirty else "False",
        hash=json.dumps(info.hash),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Write the version module; exits with an error message if it cannot be written."""
    parser = argparse.ArgumentParser(description="Generate the version module.")
    parser.add_argument("--version-file", default="VERSION", help="file holding the version")
    parser.add_argument("--output", default="version.py", help="module file to write")
    args = parser.parse_args(argv)

    info = collect_version_info(args.version_file)
    text = render_version_module(info)
    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise SystemExit(f"Unable to create output version file: {exc}") from exc
    return 0


if __name__ == "__main__":
    raise SystemExit(main())