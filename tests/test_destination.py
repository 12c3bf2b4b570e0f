import os
import stat

import pytest

from ecscli.destination import Destination, default_destination, get_file_permissions


def test_new_default_destination(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    dest = default_destination()
    assert dest.path.endswith("ecs")
    assert dest.path == os.path.join(str(tmp_path), ".ecs")
    assert stat.S_ISDIR(dest.mode)


def test_default_destination_missing_home_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path / "missing"))
    with pytest.raises(FileNotFoundError):
        default_destination()


def test_default_destination_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("USERPROFILE", raising=False)
    with pytest.raises(RuntimeError):
        default_destination()


def test_get_file_permissions_of_file(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("data")
    mode = get_file_permissions(str(target))
    assert stat.S_ISREG(mode)
    assert mode == os.stat(target).st_mode


def test_get_file_permissions_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_file_permissions(str(tmp_path / "nope"))


def test_destination_defaults():
    dest = Destination(path="somewhere")
    assert dest.path == "somewhere"
    assert dest.mode is None