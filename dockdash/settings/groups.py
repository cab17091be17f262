"""Классы групп настроек с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from dockdash.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from dockdash.settings.schemas import DEFAULT_API_URL, DEFAULT_SOCKET
from dockdash.settings.validators import (
    CompositeValidator,
    EnumValidator,
    ItemsValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)

URL_PATTERN = r"^https?://\S+$"
SOCKET_PATTERN = r"^(unix|tcp|npipe|http|https|ssh)://\S+$"


def _int_in_range(min_value: int, max_value: int) -> Validator:
    return CompositeValidator([TypeValidator(int), RangeValidator(min_value, max_value)])


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        """Возвращает доступные ключи группы."""

        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key, default)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет значениями из словаря; неизвестные ключи игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        """Сбрасывает значения группы к дефолтным."""

        self._values = dict(self._defaults)


class AppSettings(SettingsGroup):
    """Общие настройки клиента."""

    group_name = "app"

    def _initialize_defaults(self) -> None:
        self._defaults = {"language": "en"}

    def _setup_validators(self) -> None:
        self._validators = {"language": EnumValidator(["ru", "en"])}


class LoggingSettings(SettingsGroup):
    """Настройки логирования приложения."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(["DEBUG", "INFO", "WARNING", "ERROR"]),
            "max_file_size_mb": _int_in_range(1, 1000),
            "max_archived_files": _int_in_range(1, 50),
        }


class GatewaySettings(SettingsGroup):
    """Параметры HTTP-шлюза и подключения к Docker Engine."""

    group_name = "gateway"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "host": "0.0.0.0",
            "port": 4000,
            "docker_socket": DEFAULT_SOCKET,
            "log_tail_lines": 10,
            "cors_origins": ["*"],
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "host": TypeValidator(str),
            "port": _int_in_range(1, 65535),
            "docker_socket": RegexValidator(SOCKET_PATTERN),
            "log_tail_lines": _int_in_range(1, 10000),
            "cors_origins": ItemsValidator(TypeValidator(str)),
        }


class ClientSettings(SettingsGroup):
    """Параметры клиента: адрес шлюза и таймаут запросов (0 - ждать без ограничения)."""

    group_name = "client"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "api_url": DEFAULT_API_URL,
            "request_timeout_sec": 0,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "api_url": RegexValidator(URL_PATTERN),
            "request_timeout_sec": _int_in_range(0, 600),
        }
