"""Unit tests for environment configuration."""

from pathlib import Path

import pytest

from infrastructure.config import DEFAULT_SESSION_FILE, Settings

ENV_VARS = [
    "ATCODER_SESSION_FILE",
    "ATCODER_SUBMIT_LANGUAGE",
    "ATCODER_HTTP_TIMEOUT",
    "ATCODER_IMPERSONATE",
    "ATCODER_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(dotenv=False)

    assert settings.session_file == DEFAULT_SESSION_FILE
    assert settings.submit_language == "rust"
    assert settings.http_timeout == 30.0
    assert settings.impersonate == "chrome"
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ATCODER_SESSION_FILE", str(tmp_path / "cookies.json"))
    monkeypatch.setenv("ATCODER_SUBMIT_LANGUAGE", "Python")
    monkeypatch.setenv("ATCODER_HTTP_TIMEOUT", "7.5")
    monkeypatch.setenv("ATCODER_LOG_LEVEL", "debug")

    settings = Settings.from_env(dotenv=False)

    assert settings.session_file == Path(tmp_path / "cookies.json")
    assert settings.submit_language == "Python"
    assert settings.http_timeout == 7.5
    assert settings.log_level == "DEBUG"


def test_invalid_timeout_names_variable(monkeypatch):
    monkeypatch.setenv("ATCODER_HTTP_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="ATCODER_HTTP_TIMEOUT"):
        Settings.from_env(dotenv=False)
