"""Tests for configuration loading."""

from dataclasses import fields

from autoselect.config import MAX_WAIT_MS, TARGET_INDEX, AutoselectConfig, load_config


def test_defaults(monkeypatch):
    for name in (
        "AUTOSELECT_MAX_WAIT_MS",
        "AUTOSELECT_PREWARM",
        "AUTOSELECT_SHORTCUT_DB",
        "AUTOSELECT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.max_wait_ms == MAX_WAIT_MS == 350.0
    assert config.prewarm is True
    assert config.shortcut_db is None
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AUTOSELECT_MAX_WAIT_MS", "500")
    monkeypatch.setenv("AUTOSELECT_PREWARM", "no")
    monkeypatch.setenv("AUTOSELECT_SHORTCUT_DB", "/tmp/keywords.db")
    monkeypatch.setenv("AUTOSELECT_LOG_LEVEL", "debug")

    config = load_config()

    assert config.max_wait_ms == 500.0
    assert config.prewarm is False
    assert config.shortcut_db == "/tmp/keywords.db"
    assert config.log_level == "DEBUG"


def test_target_index_is_not_configurable(monkeypatch):
    monkeypatch.setenv("AUTOSELECT_TARGET_INDEX", "0")

    load_config()

    assert TARGET_INDEX == 1
    assert "target_index" not in {f.name for f in fields(AutoselectConfig)}
