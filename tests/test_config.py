"""Tests for store file location."""

from pathlib import Path

import pytest

from questkv import FileError
from questkv.config import resolve_path


@pytest.fixture(autouse=True)
def no_override(monkeypatch):
    monkeypatch.delenv("QUESTKV_PATH", raising=False)


class TestResolvePath:
    def test_default_under_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_path() == tmp_path / ".questconfig"

    def test_relative_under_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_path(".other") == tmp_path / ".other"

    def test_absolute_used_as_is(self, tmp_path):
        assert resolve_path(tmp_path / "x") == tmp_path / "x"

    def test_tilde_expanded(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_path("~/x") == tmp_path / "x"

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QUESTKV_PATH", str(tmp_path / "env"))
        assert resolve_path() == tmp_path / "env"

    def test_absolute_beats_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("QUESTKV_PATH", str(tmp_path / "env"))
        assert resolve_path(tmp_path / "x") == tmp_path / "x"

    def test_no_home(self, monkeypatch):
        def fail():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", staticmethod(fail))
        with pytest.raises(FileError, match="home directory"):
            resolve_path()

    def test_relative_beats_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("QUESTKV_PATH", str(tmp_path / "env"))
        assert resolve_path(".other") == tmp_path / ".other"
