import os

import pytest

from ecscli import cache
from ecscli.cache import Cache, CacheMissError, FSCache, NoopCache, cache_dir


@pytest.fixture
def home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def test_cache_creates_dir_with_user_only_perms(home, monkeypatch):
    created = []

    def fake_makedirs(path, mode=0o777, exist_ok=False):
        created.append((path, mode))

    monkeypatch.setattr(cache.os, "makedirs", fake_makedirs)
    FSCache("foo")
    assert created == [(cache_dir("foo"), 0o700)]


def test_cache_dir_layout(home):
    assert cache_dir("foo") == os.path.join(str(home), ".cache", "ecs-cli", "foo")


def test_fs_cache_creates_directory(home):
    fs_cache = FSCache("foo")
    assert os.path.isdir(fs_cache.cache_dir)
    assert fs_cache.cache_dir == cache_dir("foo")


def test_fs_cache_round_trip(home):
    fs_cache = FSCache("foo")
    value = {"cluster": "default", "ports": [80, 443]}
    fs_cache.put("key", value)
    assert fs_cache.get("key") == value


def test_fs_cache_persists_between_instances(home):
    FSCache("bar").put("k", ["a", "b"])
    assert FSCache("bar").get("k") == ["a", "b"]


def test_fs_cache_overwrites(home):
    fs_cache = FSCache("foo")
    fs_cache.put("k", 1)
    fs_cache.put("k", 2)
    assert fs_cache.get("k") == 2


def test_fs_cache_missing_key(home):
    with pytest.raises(CacheMissError):
        FSCache("foo").get("absent")


def test_fs_cache_namespaces_are_separate(home):
    FSCache("one").put("k", "first")
    with pytest.raises(CacheMissError):
        FSCache("two").get("k")


def test_noop_cache_never_returns():
    noop = NoopCache()
    noop.put("k", "v")
    with pytest.raises(CacheMissError, match="noop cache"):
        noop.get("k")


def test_cache_is_abstract():
    with pytest.raises(TypeError):
        Cache()