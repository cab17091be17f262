"""Тесты пользовательских исключений подсистемы настроек."""

from __future__ import annotations

from pathlib import Path

import pytest

from dockdash.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)


def test_not_found_message_and_logging(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = SettingsNotFoundError("gateway", "port")
    assert str(error) == "Setting 'gateway.port' not found"
    assert "gateway.port" in caplog.text


def test_validation_error_contains_reason_and_value(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = SettingsValidationError("gateway.port", 0, "out of range")
    assert error.key == "gateway.port"
    assert error.value == 0
    assert "out of range" in str(error)
    assert "out of range" in caplog.text


def test_io_error_contains_path(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    fake_path = tmp_path / "config.json"
    error = SettingsIOError(fake_path, "permission denied")
    assert str(fake_path) in str(error)
    assert "permission denied" in caplog.text
