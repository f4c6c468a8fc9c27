"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from pizzeria.infrastructure.config import (
    DEFAULT_DATA_DIR,
    ConfigurationError,
    load_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)  # keep any real .env out of the way
    for name in ("PIZZERIA_DATA_DIR", "PIZZERIA_LOG_LEVEL", "PIZZERIA_REFRESH_SECONDS"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings()
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.log_level == "WARNING"
    assert settings.refresh_seconds == 5.0


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("PIZZERIA_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PIZZERIA_LOG_LEVEL", "debug")
    monkeypatch.setenv("PIZZERIA_REFRESH_SECONDS", "2.5")

    settings = load_settings()
    assert settings.orders_file == Path(tmp_path) / "orders.json"
    assert settings.log_level == "DEBUG"
    assert settings.refresh_seconds == 2.5


@pytest.mark.parametrize(
    "name, value",
    [
        ("PIZZERIA_LOG_LEVEL", "LOUD"),
        ("PIZZERIA_REFRESH_SECONDS", "soon"),
        ("PIZZERIA_REFRESH_SECONDS", "0"),
    ],
)
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        load_settings()
