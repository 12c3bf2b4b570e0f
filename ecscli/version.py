"""Version information for the command line tool."""

APP_NAME = "ecs-cli"

VERSION = "0.3.0"

# Whether the working tree was dirty when this build was made.
GIT_DIRTY = True

GIT_SHORT_HASH = "UNKNOWN"


def version_string() -> str:
    """Return a human-readable version such as ``0.3.0 (*abc1234)``."""
    marker = "*" if GIT_DIRTY else ""
    return f"{VERSION} ({marker}{GIT_SHORT_HASH})"