"""Обёртка над docker-py с ленивой и потокобезопасной инициализацией."""

from __future__ import annotations

import logging
import threading
from typing import Any

import docker
from docker.errors import APIError, DockerException, NotFound

from dockdash.docker_api.exceptions import (
    ContainerNotFoundError,
    DockerAPIError,
    RuntimeRequestError,
    RuntimeUnavailableError,
)
from dockdash.utils.helpers import normalize_socket_path

LOGGER = logging.getLogger(__name__)

# Ошибки транспорта requests наследуются от OSError, как и ошибки сокета
RUNTIME_ERRORS = (DockerException, OSError)


class DockerClientWrapper:
    """Единственный на процесс дескриптор Docker API, общий для всех запросов."""

    def __init__(self, socket_url: str, raw_client: Any | None = None) -> None:
        self.socket_url = normalize_socket_path(socket_url)  # unix:///var/run/docker.sock
        self._client = raw_client
        self._lock = threading.Lock()

    def _create_client(self) -> Any:
        try:
            return docker.DockerClient(base_url=self.socket_url)
        except RUNTIME_ERRORS as exc:
            LOGGER.error("Docker client init error via %s: %s", self.socket_url, exc)
            raise RuntimeUnavailableError(str(exc)) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client, создавая его при первом обращении."""

        with self._lock:
            if self._client is None:
                self._client = self._create_client()
            return self._client

    def ping(self) -> bool:
        """Проверяет доступность Docker."""

        try:
            self.get_raw_client().ping()
            return True
        except DockerAPIError:
            return False
        except RUNTIME_ERRORS as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            return False


def translate_error(exc: BaseException) -> DockerAPIError:
    """Сопоставляет исключение docker-py/requests с типизированной ошибкой."""

    if isinstance(exc, DockerAPIError):
        return exc
    if isinstance(exc, NotFound):
        return ContainerNotFoundError(_error_message(exc))
    if isinstance(exc, (APIError, DockerException)):
        return RuntimeRequestError(_error_message(exc))
    return RuntimeUnavailableError(str(exc))


def _error_message(exc: BaseException) -> str:
    explanation = getattr(exc, "explanation", None)
    if explanation:
        return str(explanation)
    return str(exc)
