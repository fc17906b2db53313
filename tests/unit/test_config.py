"""Tests for Settings (env loading, log level validation, caching)."""

import logging

import pytest
from pydantic import ValidationError

from fieldtypes.core.config import Settings, get_settings
from fieldtypes.shared.telemetry.logging import get_logger, setup_logging


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.app_name == "fieldtypes"
    assert settings.debug is False
    assert settings.log_level == "INFO"
    assert settings.field_type_strict_hash is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables are read case-insensitively."""
    monkeypatch.setenv("FIELD_TYPE_STRICT_HASH", "false")
    monkeypatch.setenv("log_level", "debug")
    settings = get_settings()
    assert settings.field_type_strict_hash is False
    assert settings.log_level == "DEBUG"


def test_invalid_log_level_rejected() -> None:
    with pytest.raises(ValidationError, match="log_level"):
        Settings(_env_file=None, log_level="chatty")


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_setup_logging_uses_debug_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """DEBUG flag wins over log_level."""
    monkeypatch.setenv("DEBUG", "true")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging()
        assert root.level == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_get_logger() -> None:
    assert get_logger("fieldtypes.test").name == "fieldtypes.test"
