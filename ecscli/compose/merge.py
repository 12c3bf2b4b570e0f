"""Gathering a service's environment from its compose settings and env files."""

from __future__ import annotations

from .context import Context
from .types import ServiceConfig


def _lines(content: bytes) -> list[str]:
    text = content.decode("utf-8", errors="replace")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def get_env_vars_from_config(context: Context, service_config: ServiceConfig) -> list[str]:
    """Return the service's environment, extended with entries from its env files.

    Entries from ``environment`` win; among env files, later files win over
    earlier ones. Raises ValueError if env files are given but the context has
    no way to load them, and OSError if one cannot be read.
    """
    env_vars = service_config.environment.slice()
    env_files = service_config.env_file.slice()
    if not env_files:
        return env_vars

    compose_file = context.compose_file
    if context.config_lookup is None:
        raise ValueError(
            f"Can not use env_file in file {compose_file} "
            "no mechanism provided to load files"
        )

    for env_file in reversed(env_files):
        content, _ = context.config_lookup.lookup(env_file, compose_file)
        for raw_line in _lines(content):
            line = raw_line.strip()
            name, sep, _ = line.partition("=")
            key = name + sep
            if not any(existing.startswith(key) for existing in env_vars):
                env_vars.append(line)

    return env_vars