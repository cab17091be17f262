"""Реестр настроек шлюза и клиента (Singleton)."""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dockdash.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from dockdash.settings.groups import (
    AppSettings,
    ClientSettings,
    GatewaySettings,
    LoggingSettings,
    SettingsGroup,
)
from dockdash.settings.schemas import DEFAULT_CONFIG, ENV_OVERRIDES
from dockdash.utils.paths import WORKSPACE_DIR_NAME


class SettingsRegistry:
    """Singleton-реестр, управляющий всеми группами настроек."""

    _instance: Optional["SettingsRegistry"] = None

    def __new__(cls, config_path: Optional[Path] = None) -> "SettingsRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        if getattr(self, "_initialized", False):
            if config_path is not None:
                self._file_path = config_path
            return

        self._logger = logging.getLogger(__name__)
        self._file_path = config_path or Path.home() / WORKSPACE_DIR_NAME / "config.json"
        self._settings: Dict[str, SettingsGroup] = {}
        self._metadata: Dict[str, Any] = {}

        self._register_groups()
        self._extract_metadata(DEFAULT_CONFIG)
        self._initialized = True

    @property
    def config_path(self) -> Path:
        """Путь к текущему файлу конфигурации."""

        return self._file_path

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        settings_group = self._settings.get(group)
        if not settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        try:
            return settings_group.get(key)
        except SettingsNotFoundError:
            if default is not None:
                return default
            raise

    def set_value(self, group: str, key: str, value: Any) -> None:
        self._require_group(group).set(key, value)

    def get_group(self, group: str) -> SettingsGroup:
        return self._require_group(group)

    def save_to_disk(self, path: Optional[Path] = None) -> None:
        target = path or self._file_path
        payload = dict(self._metadata)
        for name, group in self._settings.items():
            payload[name] = group.to_dict()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise SettingsIOError(target, str(exc)) from exc

    def load_from_disk(self, path: Optional[Path] = None) -> None:
        target = path or self._file_path
        if not target.exists():
            self._logger.info("Config file %s not found, writing defaults.", target)
            self.save_to_disk(target)
            return
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level JSON value must be an object")

        merged = self._merge_with_defaults(content)
        self._extract_metadata(merged)
        for name, group in self._settings.items():
            group_data = merged.get(name, {})
            if isinstance(group_data, dict):
                group.from_dict(group_data)

    def apply_environment(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Переопределяет значения из переменных окружения (PORT, DOCKER_SOCKET, ...)."""

        env = os.environ if environ is None else environ
        for variable, (group, key, convert) in ENV_OVERRIDES.items():
            raw_value = env.get(variable)
            if raw_value is None or not raw_value.strip():
                continue
            try:
                value = convert(raw_value.strip())
            except ValueError as exc:
                raise SettingsValidationError(
                    key=f"{group}.{key}",
                    value=raw_value,
                    reason=f"cannot parse ${variable}: {exc}",
                ) from exc
            self.set_value(group, key, value)
            self._logger.debug("Setting %s.%s overridden by $%s", group, key, variable)

    def reset_to_defaults(self) -> None:
        for group in self._settings.values():
            group.reset_to_defaults()

    # ----------------------------------------------------------------- helpers
    def _register_groups(self) -> None:
        self._settings = {
            "app": AppSettings(),
            "logging": LoggingSettings(),
            "gateway": GatewaySettings(),
            "client": ClientSettings(),
        }

    def _require_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    def _merge_with_defaults(self, incoming: Dict[str, Any]) -> Dict[str, Any]:
        base = copy.deepcopy(DEFAULT_CONFIG)
        for key, value in incoming.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                base[key].update(value)
            else:
                base[key] = value
        return base

    def _extract_metadata(self, data: Dict[str, Any]) -> None:
        self._metadata = {key: value for key, value in data.items() if key not in self._settings}
