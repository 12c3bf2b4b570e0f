import pytest

from ecscli.compose.context import Context
from ecscli.compose.lookup import FileConfigLookup
from ecscli.compose.merge import get_env_vars_from_config
from ecscli.compose.types import MaporEqualSlice, ServiceConfig, Stringorslice


def _write(tmp_path, name, contents):
    path = tmp_path / name
    path.write_bytes(contents)
    return str(path)


def test_no_env_vars():
    assert get_env_vars_from_config(Context(), ServiceConfig()) == []


def test_no_env_files():
    env = "rails_env=development"
    config = ServiceConfig(environment=MaporEqualSlice([env]))
    assert get_env_vars_from_config(Context(), config) == [env]


def test_env_files_but_no_lookup():
    config = ServiceConfig(
        environment=MaporEqualSlice(["rails_env=development"]),
        env_file=Stringorslice("envFile"),
    )
    with pytest.raises(ValueError):
        get_env_vars_from_config(Context(), config)


def test_env_files_but_no_env_vars(tmp_path):
    env = "rails_env=development"
    env_file = _write(tmp_path, "envfile", env.encode())
    config = ServiceConfig(env_file=Stringorslice(env_file))
    context = Context(config_lookup=FileConfigLookup())
    assert get_env_vars_from_config(context, config) == [env]


def test_env_vars_and_files(tmp_path):
    env_file1 = _write(
        tmp_path,
        "envfile1",
        b"envKey2=envValue2\nenvKey1=envValue3\nenvKey4=envKey4",
    )
    env_file2 = _write(tmp_path, "envfile2", b"envKey3=envValue3\nenvKey4=envValue4first")
    config = ServiceConfig(
        environment=MaporEqualSlice(["envKey1=envValue1"]),
        env_file=Stringorslice(env_file1, env_file2),
    )
    context = Context(config_lookup=FileConfigLookup())
    observed = get_env_vars_from_config(context, config)
    assert len(observed) == 4
    assert sorted(observed) == [
        "envKey1=envValue1",
        "envKey2=envValue2",
        "envKey3=envValue3",
        "envKey4=envValue4first",
    ]


def test_missing_env_file_raises(tmp_path):
    config = ServiceConfig(env_file=Stringorslice(str(tmp_path / "absent")))
    context = Context(config_lookup=FileConfigLookup())
    with pytest.raises(FileNotFoundError):
        get_env_vars_from_config(context, config)


def test_env_file_relative_to_compose_file(tmp_path):
    _write(tmp_path, "app.env", b"  KEY=value  \n")
    config = ServiceConfig(env_file=Stringorslice("app.env"))
    context = Context(
        compose_file=str(tmp_path / "docker-compose.yml"),
        config_lookup=FileConfigLookup(),
    )
    assert get_env_vars_from_config(context, config) == ["KEY=value"]


def test_service_environment_is_not_mutated(tmp_path):
    env_file = _write(tmp_path, "envfile", b"B=2")
    environment = MaporEqualSlice(["A=1"])
    config = ServiceConfig(environment=environment, env_file=Stringorslice(env_file))
    context = Context(config_lookup=FileConfigLookup())
    assert get_env_vars_from_config(context, config) == ["A=1", "B=2"]
    assert environment.slice() == ["A=1"]