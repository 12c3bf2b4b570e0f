# ecscli

Building blocks for a container-cluster command-line tool:

- `ecscli.utils`: `get_home_dir()` (from `HOME`, else `USERPROFILE`, else
  `RuntimeError`) and the `Sleeper` / `TimeSleeper` pair for code that waits.
- `ecscli.destination`: `Destination`, `get_file_permissions()` and
  `default_destination()`, which points at `~/.ecs` with the home directory's mode.
- `ecscli.cache`: the `Cache` interface, `FSCache` (one pickled file per key
  under `~/.cache/ecs-cli/<name>`, directory created with mode `0700`),
  `NoopCache`, `cache_dir()` and `CacheMissError`.
- `ecscli.ami`: `StaticAmiIds`, a fixed table of ECS-optimized AMI ids by region.
- `ecscli.version`: `APP_NAME`, `VERSION`, `GIT_DIRTY`, `GIT_SHORT_HASH` and
  `version_string()`.
- `ecscli.compose`: helpers for compose files (see below).
- `ecscli.version_gen`: the generator for the version module.

No third-party libraries are needed.

## Install

```
pip install .
pip install ".[test]"   # to run the tests
```

## Usage

```python
from ecscli.utils import get_home_dir
from ecscli.version import version_string
from ecscli.ami import StaticAmiIds
from ecscli.cache import FSCache, NoopCache, CacheMissError

print(get_home_dir())
print(version_string())            # "0.3.0 (*UNKNOWN)"
print(StaticAmiIds().get("us-west-2"))   # unknown regions raise LookupError

cache = FSCache("example")         # stored under ~/.cache/ecs-cli/example
cache.put("answer", {"value": 42})
print(cache.get("answer"))         # a missing key raises CacheMissError

NoopCache().put("answer", 1)       # stores nothing; get() always raises CacheMissError
```

## Compose helpers

- `ecscli.compose.types`: `ServiceConfig` with `from_yaml()` / `to_yaml()`
  working on already-loaded YAML data (mappings and lists), the flexible
  value types `Stringorslice`, `Command`, `SliceorMap`, `MaporEqualSlice`,
  `MaporColonSlice`, `MaporSpaceSlice`, the `Event` enum (its `str()` is a
  human-readable message) and `InfoPart`.
- `ecscli.compose.info`: `format_info_set()` renders rows of `InfoPart` as
  aligned columns headed by the keys of the first row.
- `ecscli.compose.lookup`: `FileConfigLookup` reads files relative to the
  referring file's directory; `OsEnvLookup` returns `["KEY=value"]` from the
  process environment, or `[]` when unset or empty.
- `ecscli.compose.context`: `Context.open()` reads the compose file (`"-"` for
  stdin) and settles the project name from `project_name`, then
  `COMPOSE_PROJECT_NAME`, then the compose file's directory name; the name is
  lower-cased, invalid characters become `-`, and a leading `_`, `.` or `-`
  gets an `x` prefix. `ProjectNameError` is raised if no name results.
- `ecscli.compose.merge`: `get_env_vars_from_config()`.

```python
from ecscli.compose.context import Context
from ecscli.compose.lookup import FileConfigLookup
from ecscli.compose.types import ServiceConfig, MaporEqualSlice, Stringorslice
from ecscli.compose.merge import get_env_vars_from_config

config = ServiceConfig(
    environment=MaporEqualSlice.from_yaml({"RAILS_ENV": "development"}),
    env_file=Stringorslice.from_yaml("app.env"),
)
context = Context(compose_file="docker-compose.yml", config_lookup=FileConfigLookup())
print(get_env_vars_from_config(context, config))
```

Values in `environment` take precedence over values from `env_file` entries,
and later env files take precedence over earlier ones. Env files without a
`config_lookup` on the context raise `ValueError`.

## Generating the version module

```
ecscli-version-gen [--version-file VERSION] [--output version.py]
```

It reads the version from `--version-file` (default `VERSION`; an unreadable
file gives an empty version), asks git for the short commit hash unless
`ECS_UNKNOWN_VERSION` is set, asks git whether the checkout is clean only when
`ECS_RELEASE=cleanbuild` (otherwise the build counts as dirty), and writes the
module to `--output` (default `version.py`).

## What this package does not do

It has no cluster command-line interface, does not read or write the tool's
INI config file, and makes no calls to cloud services. It does not parse YAML
text itself: `ServiceConfig.from_yaml()` takes data already loaded by a YAML
library of your choice.