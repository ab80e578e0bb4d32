"""Tests for ProviderSettings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cpconf.settings import ProviderSettings


class TestProviderSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CP_PATH", "CP_STANDALONE", "CP_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = ProviderSettings(_env_file=None)
        assert settings.path == Path("~/.swan/computing").expanduser()
        assert settings.standalone is False
        assert settings.log_level == "INFO"

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CP_PATH", str(tmp_path))
        monkeypatch.setenv("CP_STANDALONE", "true")
        monkeypatch.setenv("CP_LOG_LEVEL", "debug")
        settings = ProviderSettings(_env_file=None)
        assert settings.path == tmp_path
        assert settings.standalone is True
        assert settings.log_level == "DEBUG"

    def test_path_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        settings = ProviderSettings(path="~/repo", _env_file=None)
        assert settings.path == tmp_path / "repo"

    def test_invalid_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("CP_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            ProviderSettings(_env_file=None)
