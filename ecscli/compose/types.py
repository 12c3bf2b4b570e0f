"""Service definitions of a compose file and the flexible YAML value types they use."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Optional

CONTAINER_ID = "container_id"


class Event(enum.IntEnum):
    """Lifecycle events reported while working on a project."""

    NO_EVENT = 1
    CONTAINER_CREATED = 2
    CONTAINER_STARTED = 3
    PROJECT_CREATE_START = 4
    PROJECT_CREATE_DONE = 5
    PROJECT_UP_START = 6
    PROJECT_UP_DONE = 7
    PROJECT_DELETE_START = 8
    PROJECT_DELETE_DONE = 9
    PROJECT_START_START = 10
    PROJECT_START_DONE = 11

    def __str__(self) -> str:
        return _EVENT_MESSAGES.get(self) or f"Event: {int(self)}"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_EVENT_MESSAGES = {
    Event.CONTAINER_CREATED: "Created container",
    Event.CONTAINER_STARTED: "Started container",
    Event.PROJECT_CREATE_START: "Creating project",
    Event.PROJECT_CREATE_DONE: "Project created",
    Event.PROJECT_UP_START: "Starting project",
    Event.PROJECT_UP_DONE: "Project started",
    Event.PROJECT_DELETE_START: "Deleting project",
    Event.PROJECT_DELETE_DONE: "Project deleted",
    Event.PROJECT_START_START: "Starting project",
    Event.PROJECT_START_DONE: "Project started",
}


@dataclass(frozen=True)
class InfoPart:
    """One labelled value in a row of information."""

    key: str
    value: str


Info = list[InfoPart]
InfoSet = list[Info]


def _to_str(value: Any) -> str:
    """Read a YAML scalar as a string; collections are rejected."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise TypeError(f"cannot read a {type(value).__name__} as a string")


def _to_str_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"expected a sequence, got a {type(value).__name__}")
    return [_to_str(item) for item in value]


def _to_str_map(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise TypeError(f"expected a mapping, got a {type(value).__name__}")
    return {_to_str(key): _to_str(item) for key, item in value.items()}


def _string_or_list(value: Any) -> list[str]:
    """Read null, a scalar or a list of scalars as a list of strings."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return _to_str_list(value)
    return [_to_str(value)]


def _map_or_list(value: Any, separator: str) -> list[str]:
    """Read a list of strings, or a mapping joined into ``key<sep>value`` strings."""
    if value is None:
        return []
    if isinstance(value, Mapping):
        return [f"{key}{separator}{item}" for key, item in _to_str_map(value).items()]
    return _to_str_list(value)


class _StringList:
    """Ordered list of strings with value equality."""

    __slots__ = ("_parts",)

    def __init__(self, parts: Iterable[str] = ()) -> None:
        self._parts = list(parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parts)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parts!r})"


class Stringorslice(_StringList):
    """A value written either as a single string or as a list of strings."""

    __slots__ = ()

    def __init__(self, *parts: str) -> None:
        super().__init__(parts)

    @classmethod
    def from_yaml(cls, value: Any) -> "Stringorslice":
        """Build from a loaded YAML value: a list, a scalar or null."""
        return cls(*_string_or_list(value))

    def to_yaml(self) -> list[str]:
        """Return the value as it is written to YAML."""
        return list(self._parts)

    def slice(self) -> list[str]:
        """Return the parts as a list."""
        return list(self._parts)

    def __len__(self) -> int:
        return len(self._parts)


class Command(_StringList):
    """A command written either as one string or as a list of arguments."""

    __slots__ = ()

    def __init__(self, *parts: str) -> None:
        super().__init__(parts)

    @classmethod
    def from_yaml(cls, value: Any) -> "Command":
        """Build from a loaded YAML value; a string stays a single part."""
        return cls(*_string_or_list(value))

    def to_yaml(self) -> list[str]:
        """Return the value as it is written to YAML."""
        return list(self._parts)

    def slice(self) -> list[str]:
        """Return the arguments as a list."""
        return list(self._parts)

    def __str__(self) -> str:
        return " ".join(self._parts)


class SliceorMap:
    """A mapping written either as a mapping or as a list of ``key=value`` entries."""

    __slots__ = ("_parts",)

    def __init__(self, parts: Optional[Mapping[str, str]] = None) -> None:
        self._parts = dict(parts or {})

    @classmethod
    def from_yaml(cls, value: Any) -> "SliceorMap":
        """Build from a loaded YAML mapping or list of ``key=value`` strings."""
        if value is None:
            return cls()
        if isinstance(value, Mapping):
            return cls(_to_str_map(value))
        parts: dict[str, str] = {}
        for entry in _to_str_list(value):
            key, _, item = entry.strip().partition("=")
            parts[key] = item
        return cls(parts)

    def to_yaml(self) -> dict[str, str]:
        """Return the value as it is written to YAML."""
        return dict(self._parts)

    def map_parts(self) -> dict[str, str]:
        """Return the entries as a dictionary."""
        return dict(self._parts)

    def __len__(self) -> int:
        return len(self._parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SliceorMap):
            return NotImplemented
        return self._parts == other._parts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SliceorMap({self._parts!r})"


class MaporEqualSlice(_StringList):
    """List of ``key=value`` strings, or a mapping turned into one."""

    __slots__ = ()

    def __init__(self, parts: Optional[Iterable[str]] = None) -> None:
        super().__init__(parts or ())

    @classmethod
    def from_yaml(cls, value: Any) -> "MaporEqualSlice":
        """Build from a loaded YAML list of strings or mapping."""
        return cls(_map_or_list(value, "="))

    def to_yaml(self) -> list[str]:
        """Return the value as it is written to YAML."""
        return list(self._parts)

    def slice(self) -> list[str]:
        """Return the entries as a list."""
        return list(self._parts)


class MaporColonSlice(_StringList):
    """List of ``key:value`` strings, or a mapping turned into one."""

    __slots__ = ()

    def __init__(self, parts: Optional[Iterable[str]] = None) -> None:
        super().__init__(parts or ())

    @classmethod
    def from_yaml(cls, value: Any) -> "MaporColonSlice":
        """Build from a loaded YAML list of strings or mapping."""
        return cls(_map_or_list(value, ":"))

    def to_yaml(self) -> list[str]:
        """Return the value as it is written to YAML."""
        return list(self._parts)

    def slice(self) -> list[str]:
        """Return the entries as a list."""
        return list(self._parts)


class MaporSpaceSlice(_StringList):
    """List of ``key value`` strings, or a mapping turned into one."""

    __slots__ = ()

    def __init__(self, parts: Optional[Iterable[str]] = None) -> None:
        super().__init__(parts or ())

    @classmethod
    def from_yaml(cls, value: Any) -> "MaporSpaceSlice":
        """Build from a loaded YAML list of strings or mapping."""
        return cls(_map_or_list(value, " "))

    def to_yaml(self) -> list[str]:
        """Return the value as it is written to YAML."""
        return list(self._parts)

    def slice(self) -> list[str]:
        """Return the entries as a list."""
        return list(self._parts)


_SCALAR_DEFAULTS = {"str": "", "int": 0, "bool": False}


def _option(key: str, kind: Any, omitempty: bool = True) -> Any:
    meta = {"yaml": key, "kind": kind, "omitempty": omitempty}
    if kind in _SCALAR_DEFAULTS:
        return field(default=_SCALAR_DEFAULTS[kind], metadata=meta)
    if kind == "list":
        return field(default_factory=list, metadata=meta)
    if kind == "map":
        return field(default_factory=dict, metadata=meta)
    return field(default_factory=kind, metadata=meta)


def _decode(kind: Any, value: Any) -> Any:
    if kind == "str":
        return _to_str(value)
    if kind == "int":
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise TypeError(f"expected an integer, got a {type(value).__name__}")
    if kind == "bool":
        if isinstance(value, bool):
            return value
        raise TypeError(f"expected a boolean, got a {type(value).__name__}")
    if kind == "list":
        return _to_str_list(value)
    if kind == "map":
        return _to_str_map(value)
    return kind.from_yaml(value)


@dataclass
class ServiceConfig:
    """The compose options of one service."""

    build: str = _option("build", "str")
    cap_add: list[str] = _option("cap_add", "list")
    cap_drop: list[str] = _option("cap_drop", "list")
    cpuset: str = _option("cpuset", "str")
    cpu_shares: int = _option("cpu_shares", "int")
    command: Command = _option("command", Command, omitempty=False)
    devices: list[str] = _option("devices", "list")
    dns: Stringorslice = _option("dns", Stringorslice, omitempty=False)
    dns_search: Stringorslice = _option("dns_search", Stringorslice, omitempty=False)
    dockerfile: str = _option("dockerfile", "str")
    domain_name: str = _option("domainname", "str")
    entrypoint: Command = _option("entrypoint", Command, omitempty=False)
    env_file: Stringorslice = _option("env_file", Stringorslice, omitempty=False)
    environment: MaporEqualSlice = _option("environment", MaporEqualSlice, omitempty=False)
    hostname: str = _option("hostname", "str")
    image: str = _option("image", "str")
    labels: SliceorMap = _option("labels", SliceorMap, omitempty=False)
    links: MaporColonSlice = _option("links", MaporColonSlice, omitempty=False)
    log_driver: str = _option("log_driver", "str")
    mem_limit: int = _option("mem_limit", "int")
    mem_swap_limit: int = _option("memswap_limit", "int")
    name: str = _option("name", "str")
    net: str = _option("net", "str")
    pid: str = _option("pid", "str")
    uts: str = _option("uts", "str")
    ipc: str = _option("ipc", "str")
    ports: list[str] = _option("ports", "list")
    privileged: bool = _option("privileged", "bool")
    restart: str = _option("restart", "str")
    read_only: bool = _option("read_only", "bool")
    stdin_open: bool = _option("stdin_open", "bool")
    security_opt: list[str] = _option("security_opt", "list")
    tty: bool = _option("tty", "bool")
    user: str = _option("user", "str")
    ulimits: list[str] = _option("ulimits", "list")
    volume_driver: str = _option("volume_driver", "str")
    volumes: list[str] = _option("volumes", "list")
    volumes_from: list[str] = _option("volumes_from", "list")
    working_dir: str = _option("working_dir", "str")
    expose: list[str] = _option("expose", "list")
    external_links: list[str] = _option("external_links", "list")
    log_opt: dict[str, str] = _option("log_opt", "map")
    extra_hosts: list[str] = _option("extra_hosts", "list")

    @classmethod
    def from_yaml(cls, document: Any) -> "ServiceConfig":
        """Build from the loaded YAML mapping of one service; unknown keys are ignored."""
        if not isinstance(document, Mapping):
            raise TypeError(f"expected a mapping, got a {type(document).__name__}")
        values = {}
        for option in fields(cls):
            raw = document.get(option.metadata["yaml"])
            if raw is not None:
                values[option.name] = _decode(option.metadata["kind"], raw)
        return cls(**values)

    def to_yaml(self) -> dict[str, Any]:
        """Return the service as a YAML-ready mapping, leaving out empty optional keys."""
        document: dict[str, Any] = {}
        for option in fields(self):
            value = getattr(self, option.name)
            if hasattr(value, "to_yaml"):
                encoded = value.to_yaml()
            elif isinstance(value, (list, dict)):
                encoded = type(value)(value)
            else:
                encoded = value
            if option.metadata["omitempty"] and not encoded:
                continue
            document[option.metadata["yaml"]] = encoded
        return document