"""Функции для чтения контейнеров и их логов через Docker client."""

from __future__ import annotations

from typing import List

from dockdash.docker_api.client import RUNTIME_ERRORS, DockerClientWrapper, translate_error
from dockdash.docker_api.exceptions import ContainerNotFoundError
from dockdash.docker_api.models import ContainerSummary
from dockdash.utils.helpers import tail_lines

DEFAULT_TAIL = 10


def list_containers(client: DockerClientWrapper) -> List[ContainerSummary]:
    """Возвращает все контейнеры, включая остановленные, в порядке ответа Docker."""

    try:
        raw = client.get_raw_client()
        entries = raw.api.containers(all=True)
    except RUNTIME_ERRORS as exc:
        raise translate_error(exc) from exc
    return [ContainerSummary.from_api(entry) for entry in entries]


def fetch_logs(client: DockerClientWrapper, container_id: str, *, tail: int = DEFAULT_TAIL) -> str:
    """Возвращает последние ``tail`` строк объединённых stdout и stderr контейнера."""

    if not container_id or not container_id.strip():
        raise ContainerNotFoundError("Container id must not be empty")
    try:
        raw = client.get_raw_client()
        data = raw.api.logs(container_id, stdout=True, stderr=True, tail=tail)
    except RUNTIME_ERRORS as exc:
        raise translate_error(exc) from exc
    if isinstance(data, bytes):
        text = data.decode("utf-8", errors="replace")
    else:
        text = str(data)
    return tail_lines(text, tail)
