import pytest

from ecscli.compose.lookup import (
    ConfigLookup,
    EnvironmentLookup,
    FileConfigLookup,
    OsEnvLookup,
)


def test_file_lookup_absolute_path(tmp_path):
    target = tmp_path / "env"
    target.write_bytes(b"A=1\n")
    content, name = FileConfigLookup().lookup(str(target), "/elsewhere/compose.yml")
    assert content == b"A=1\n"
    assert name == str(target)


def test_file_lookup_relative_to_compose_file(tmp_path):
    target = tmp_path / "env"
    target.write_bytes(b"B=2")
    relative_to = str(tmp_path / "docker-compose.yml")
    content, name = FileConfigLookup().lookup("env", relative_to)
    assert content == b"B=2"
    assert name == str(target)


def test_file_lookup_relative_path_is_cleaned(tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    target = tmp_path / "vars"
    target.write_bytes(b"C=3")
    content, name = FileConfigLookup().lookup("../vars", str(sub / "compose.yml"))
    assert content == b"C=3"
    assert name == str(target)


def test_file_lookup_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileConfigLookup().lookup(str(tmp_path / "absent"), "")


def test_os_env_lookup_set(monkeypatch):
    monkeypatch.setenv("ECSCLI_TEST_VAR", "value")
    assert OsEnvLookup().lookup("ECSCLI_TEST_VAR", "web", None) == ["ECSCLI_TEST_VAR=value"]


def test_os_env_lookup_unset(monkeypatch):
    monkeypatch.delenv("ECSCLI_TEST_VAR", raising=False)
    assert OsEnvLookup().lookup("ECSCLI_TEST_VAR", "web", None) == []


def test_os_env_lookup_empty_value(monkeypatch):
    monkeypatch.setenv("ECSCLI_TEST_VAR", "")
    assert OsEnvLookup().lookup("ECSCLI_TEST_VAR", "web", None) == []


@pytest.mark.parametrize("abstract", [ConfigLookup, EnvironmentLookup])
def test_interfaces_are_abstract(abstract):
    with pytest.raises(TypeError):
        abstract()