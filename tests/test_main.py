"""Тесты вспомогательных функций модуля main."""

from __future__ import annotations

import logging
from pathlib import Path

from dockdash.main import initialize_settings, initialize_workdir, setup_logging_from_settings
from dockdash.settings.groups import LoggingSettings
from dockdash.settings.registry import SettingsRegistry


class DummySettings:
    def __init__(self, enabled: bool = True, level: str = "INFO") -> None:
        self.logging = LoggingSettings()
        self.logging.set("enabled", enabled)
        self.logging.set("level", level)

    def get_group(self, name: str):
        if name == "logging":
            return self.logging
        raise KeyError(name)


def test_initialize_workdir_creates_structure(tmp_path: Path) -> None:
    assert initialize_workdir(tmp_path / ".dockdash")
    assert (tmp_path / ".dockdash" / "logs").is_dir()


def test_initialize_settings_applies_environment(fresh_registry: SettingsRegistry) -> None:
    registry = initialize_settings(fresh_registry.config_path, {"PORT": "4100"})
    assert registry is fresh_registry
    assert registry.config_path.exists()
    assert registry.get_value("gateway", "port") == 4100


def test_setup_logging_enabled_creates_log(tmp_path: Path) -> None:
    logging.disable(logging.NOTSET)
    setup_logging_from_settings(tmp_path, DummySettings(), log_file_name="gateway.log")
    logging.getLogger("test").info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()
    log_file = tmp_path / "logs" / "gateway.log"
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_setup_logging_disabled(tmp_path: Path) -> None:
    logging.disable(logging.NOTSET)
    setup_logging_from_settings(tmp_path, DummySettings(enabled=False), log_file_name="client.log")
    assert logging.root.manager.disable >= logging.CRITICAL
    logging.disable(logging.NOTSET)
