"""Исключения слоя доступа к Docker Engine."""

from __future__ import annotations


class DockerAPIError(Exception):
    """Базовая ошибка обращения к Docker с исходным сообщением."""

    kind: str = "runtime_error"

    def __init__(self, message: str) -> None:
        self.message = message or "Unknown Docker error"
        super().__init__(self.message)


class RuntimeUnavailableError(DockerAPIError):
    """Сокет Docker недоступен: нет файла, отказ в соединении или в доступе."""

    kind = "runtime_unavailable"


class ContainerNotFoundError(DockerAPIError):
    """Контейнер с указанным идентификатором не найден."""

    kind = "not_found"


class RuntimeRequestError(DockerAPIError):
    """Любая другая ошибка, которую вернул Docker Engine."""

    kind = "runtime_error"
