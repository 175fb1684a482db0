"""Settings resolution from the environment and the env file."""
import os
from pathlib import Path

import pytest

from cdms_console.core.config import DEFAULT_BASE_URL, load_settings
from cdms_console.core.utils import load_env_file


def test_defaults_without_configuration():
    settings = load_settings()

    assert settings.api_base_url == DEFAULT_BASE_URL
    assert settings.api_token is None
    assert settings.authenticated is False
    assert settings.timeout == 30.0
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CDMS_API_BASE_URL", "https://cdms.example.gov/")
    monkeypatch.setenv("CDMS_API_TOKEN", " token-123 ")
    monkeypatch.setenv("CDMS_API_TIMEOUT", "7.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.api_base_url == "https://cdms.example.gov"
    assert settings.api_token == "token-123"
    assert settings.authenticated is True
    assert settings.timeout == 7.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_invalid_timeout_raises(monkeypatch: pytest.MonkeyPatch, raw: str):
    monkeypatch.setenv("CDMS_API_TIMEOUT", raw)
    with pytest.raises(ValueError, match="CDMS_API_TIMEOUT"):
        load_settings()


def test_env_file_is_loaded_without_overriding(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    env_file = tmp_path / "cdms.env"
    env_file.write_text(
        "# local settings\n"
        "CDMS_API_TOKEN='from-file'\n"
        "CDMS_API_BASE_URL=http://file.example\n"
        "malformed line\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CDMS_ENV_FILE", str(env_file))
    monkeypatch.setenv("CDMS_API_BASE_URL", "http://env.example")

    settings = load_settings()

    assert settings.api_token == "from-file"
    assert settings.api_base_url == "http://env.example"


def test_load_env_file_ignores_missing_path(tmp_path: Path):
    assert load_env_file(tmp_path / "nope.env") == []


def test_load_env_file_reports_keys_it_set(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    env_file = tmp_path / "cdms.env"
    env_file.write_text('CDMS_API_TIMEOUT="12"\nLOG_LEVEL=debug\n\n# CDMS_API_TOKEN=commented\n', encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.delenv("CDMS_API_TIMEOUT", raising=False)

    assert load_env_file(env_file) == ["CDMS_API_TIMEOUT"]
    assert os.environ["CDMS_API_TIMEOUT"] == "12"
    assert os.environ["LOG_LEVEL"] == "warning"
    assert "CDMS_API_TOKEN" not in os.environ
