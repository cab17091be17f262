"""Состояния списка контейнеров и окна логов, независимые от Qt."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dockdash.docker_api.models import ContainerSummary

LOGS_ERROR_PLACEHOLDER = "Error fetching logs"


class ListStatus(str, Enum):
    """Фазы загрузки списка контейнеров."""

    LOADING = "loading"
    READY = "ready"
    EMPTY_ON_ERROR = "empty_on_error"


class LogViewStatus(str, Enum):
    """Фазы окна логов."""

    CLOSED = "closed"
    LOADING = "loading"
    SHOWN = "shown"
    SHOWN_WITH_ERROR = "shown_with_error"


def status_color(state: str) -> str:
    """Цвет индикатора: зелёный только для running."""

    return "green" if state == "running" else "red"


@dataclass
class ContainerListState:
    """Список контейнеров: LOADING -> READY | EMPTY_ON_ERROR."""

    status: ListStatus = ListStatus.LOADING
    containers: List[ContainerSummary] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status is ListStatus.LOADING

    def begin_refresh(self) -> None:
        self.status = ListStatus.LOADING

    def finish(self, containers: List[ContainerSummary]) -> None:
        self.status = ListStatus.READY
        self.containers = list(containers)
        self.error = None

    def fail(self, message: str) -> None:
        """Ошибка загрузки очищает список вместо исключения в интерфейсе."""

        self.status = ListStatus.EMPTY_ON_ERROR
        self.containers = []
        self.error = message


@dataclass
class LogViewState:
    """Окно логов: CLOSED -> LOADING -> SHOWN | SHOWN_WITH_ERROR."""

    status: LogViewStatus = LogViewStatus.CLOSED
    container_id: Optional[str] = None
    text: str = ""
    error: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.status is not LogViewStatus.CLOSED

    def open(self, container_id: str) -> None:
        self.status = LogViewStatus.LOADING
        self.container_id = container_id
        self.text = ""
        self.error = None

    def show(self, container_id: str, text: str) -> bool:
        """Показывает логи; ответ для другого контейнера отбрасывается."""

        if not self._accepts(container_id):
            return False
        self.status = LogViewStatus.SHOWN
        self.text = text
        return True

    def fail(self, container_id: str, message: str) -> bool:
        if not self._accepts(container_id):
            return False
        self.status = LogViewStatus.SHOWN_WITH_ERROR
        self.text = LOGS_ERROR_PLACEHOLDER
        self.error = message
        return True

    def close(self) -> None:
        self.status = LogViewStatus.CLOSED
        self.container_id = None
        self.text = ""
        self.error = None

    def _accepts(self, container_id: str) -> bool:
        return self.status is LogViewStatus.LOADING and container_id == self.container_id
