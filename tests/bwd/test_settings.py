"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from bwd.config import BwdSettings, settings_provider
from bwd.core.errors import ConfigurationError
from bwd.core.root_finder import MAX_ANCESTOR_DEPTH


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    # Keep a stray .env in the repo from leaking into the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BWD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BWD_MAX_ANCESTOR_DEPTH", raising=False)
    settings_provider.clear()
    yield
    settings_provider.clear()


def test_defaults():
    settings = BwdSettings()
    assert settings.log_level == "WARNING"
    assert settings.max_ancestor_depth == MAX_ANCESTOR_DEPTH


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BWD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BWD_MAX_ANCESTOR_DEPTH", "12")
    settings = BwdSettings()
    assert settings.log_level == "DEBUG"
    assert settings.max_ancestor_depth == 12


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("BWD_MAX_ANCESTOR_DEPTH=7\nUNRELATED=1\n", encoding="utf-8")
    assert BwdSettings().max_ancestor_depth == 7


def test_depth_must_be_positive(monkeypatch):
    monkeypatch.setenv("BWD_MAX_ANCESTOR_DEPTH", "0")
    with pytest.raises(ValidationError):
        BwdSettings()


def test_provider_caches():
    first = settings_provider.get_settings()
    assert settings_provider.get_settings() is first


def test_provider_clear_rereads_environment(monkeypatch):
    before = settings_provider.get_settings()
    monkeypatch.setenv("BWD_LOG_LEVEL", "INFO")
    assert settings_provider.get_settings() is before

    settings_provider.clear()
    assert settings_provider.get_settings().log_level == "INFO"


@pytest.mark.parametrize("value", ["0", "-3", "lots"])
def test_provider_reports_invalid_environment(monkeypatch, value):
    monkeypatch.setenv("BWD_MAX_ANCESTOR_DEPTH", value)
    with pytest.raises(ConfigurationError) as exc_info:
        settings_provider.get_settings()
    assert "max_ancestor_depth" in str(exc_info.value).lower()


def test_provider_reports_invalid_dotenv(tmp_path):
    (tmp_path / ".env").write_text("BWD_MAX_ANCESTOR_DEPTH=lots\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        settings_provider.get_settings()


def test_failed_load_is_not_cached(monkeypatch):
    monkeypatch.setenv("BWD_MAX_ANCESTOR_DEPTH", "0")
    with pytest.raises(ConfigurationError):
        settings_provider.get_settings()

    monkeypatch.setenv("BWD_MAX_ANCESTOR_DEPTH", "5")
    assert settings_provider.get_settings().max_ancestor_depth == 5
