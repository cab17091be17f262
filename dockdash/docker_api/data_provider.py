"""Менеджер доступа к данным Docker для HTTP-шлюза.

Файл описывает класс, который объединяет единственный `DockerClientWrapper`
процесса, настройки и функции из `dockdash.docker_api.containers`. Обработчики
маршрутов получают его через внедрение зависимостей и не обращаются к Docker
напрямую. Ошибки логируются и пробрасываются дальше без повторных попыток.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from dockdash.docker_api import containers
from dockdash.docker_api.client import DockerClientWrapper
from dockdash.docker_api.exceptions import DockerAPIError
from dockdash.docker_api.models import ContainerSummary

LOGGER = logging.getLogger(__name__)


class DockerDataProvider:
    """Предоставляет высокоуровневый API для чтения Docker-данных."""

    def __init__(self, client: DockerClientWrapper, settings: Any) -> None:
        self._client = client
        self._settings = settings

    @property
    def default_tail(self) -> int:
        """Число строк лога по умолчанию из настроек шлюза."""

        return int(
            self._settings.get_value("gateway", "log_tail_lines", default=containers.DEFAULT_TAIL)
        )

    # ------------------------------------------------------------------- fetches
    def fetch_containers(self) -> List[ContainerSummary]:
        """Возвращает список всех контейнеров."""

        try:
            return containers.list_containers(self._client)
        except DockerAPIError as exc:
            LOGGER.error("Cannot list containers via %s: %s", self._client.socket_url, exc)
            raise

    def fetch_container_logs(self, container_id: str, tail: Optional[int] = None) -> str:
        """Возвращает хвост логов контейнера."""

        limit = tail if tail is not None else self.default_tail
        try:
            return containers.fetch_logs(self._client, container_id, tail=limit)
        except DockerAPIError as exc:
            LOGGER.error("Cannot fetch logs for %s: %s", container_id, exc)
            raise

    def is_runtime_available(self) -> bool:
        """Проверяет, отвечает ли Docker Engine."""

        return self._client.ping()
