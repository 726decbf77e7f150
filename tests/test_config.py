from pathlib import Path

import pytest

from report_ui.config import Settings, get_settings

_ENV_KEYS = (
    "REPORT_UI_SERVICE",
    "REPORT_UI_API_BASE_URL",
    "REPORT_UI_API_TOKEN",
    "REPORT_UI_TIMEOUT",
    "REPORT_UI_STALE_SECONDS",
    "REPORT_UI_CACHE_DIR",
    "REPORT_UI_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings.from_env()

    assert settings.service == "http"
    assert settings.api_base_url == "http://localhost:8000/api/v1"
    assert settings.api_token is None
    assert settings.timeout == 30
    assert settings.stale_seconds == 300


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("REPORT_UI_SERVICE", "DEMO")
    monkeypatch.setenv("REPORT_UI_API_BASE_URL", "https://erp.example.com/api/v1/")
    monkeypatch.setenv("REPORT_UI_API_TOKEN", "token")
    monkeypatch.setenv("REPORT_UI_TIMEOUT", "10")
    monkeypatch.setenv("REPORT_UI_STALE_SECONDS", "60")
    monkeypatch.setenv("REPORT_UI_CACHE_DIR", str(tmp_path))
    monkeypatch.setenv("REPORT_UI_PORT", "3100")

    settings = Settings.from_env()

    assert settings.service == "demo"
    assert settings.api_base_url == "https://erp.example.com/api/v1"
    assert settings.api_token == "token"
    assert settings.timeout == 10
    assert settings.stale_seconds == 60
    assert settings.cache_dir == Path(tmp_path)
    assert settings.port == 3100


def test_blank_values_fall_back(monkeypatch):
    monkeypatch.setenv("REPORT_UI_API_TOKEN", "")
    monkeypatch.setenv("REPORT_UI_TIMEOUT", " ")

    settings = Settings.from_env()
    assert settings.api_token is None
    assert settings.timeout == 30


def test_invalid_integer(monkeypatch):
    monkeypatch.setenv("REPORT_UI_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="REPORT_UI_TIMEOUT"):
        Settings.from_env()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("REPORT_UI_SERVICE", "demo")

    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().service == "demo"
