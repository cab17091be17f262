"""Высокоуровневые утилиты для создания и запуска клиента."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from PySide6 import QtWidgets

from dockdash.client.api import GatewayClient
from dockdash.i18n.translator import set_language
from dockdash.settings.registry import SettingsRegistry
from dockdash.ui.main_window import create_main_window


class RunnableApp(Protocol):
    """Интерфейс приложения, которое можно запустить и получить код возврата."""

    def run(self) -> int:  # pragma: no cover - протокол
        """Запускает цикл приложения и возвращает код завершения."""


@dataclass
class GUIApp:
    """Приложение PySide6, которому передан клиент шлюза."""

    settings: SettingsRegistry
    client: GatewayClient

    def __post_init__(self) -> None:
        """Создаёт экземпляр QApplication и главное окно."""

        self._qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
        set_language(self.settings.get_value("app", "language", default="en"))
        self._window = create_main_window(client=self.client)

    def run(self) -> int:
        """Запускает основной цикл приложения."""

        self._window.show()
        return self._qt_app.exec()


def create_application(settings: SettingsRegistry) -> RunnableApp:
    """Фабрика GUI приложения: адрес шлюза и таймаут берутся из группы client."""

    timeout = int(settings.get_value("client", "request_timeout_sec", default=0))
    client = GatewayClient(
        settings.get_value("client", "api_url"),
        timeout=timeout or None,
    )
    return GUIApp(settings=settings, client=client)
