from ecscli import version


def test_version_string_default():
    assert version.version_string() == "0.3.0 (*UNKNOWN)"


def test_version_string_clean(monkeypatch):
    monkeypatch.setattr(version, "GIT_DIRTY", False)
    assert version.version_string() == "0.3.0 (UNKNOWN)"


def test_version_string_uses_hash(monkeypatch):
    monkeypatch.setattr(version, "GIT_SHORT_HASH", "abc1234")
    result = version.version_string()
    assert result.startswith(version.VERSION + " (")
    assert result.endswith("abc1234)")