"""HTTP-клиент шлюза для интерфейса."""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import requests

from dockdash.docker_api.models import ContainerSummary
from dockdash.settings.schemas import DEFAULT_API_URL

LOGGER = logging.getLogger(__name__)


class GatewayError(Exception):
    """Ошибка запроса к шлюзу (сеть, статус, формат ответа)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class GatewayClient:
    """Выполняет запросы к /containers и /containers/{id}/logs."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def list_containers(self) -> List[ContainerSummary]:
        """Возвращает контейнеры в порядке ответа шлюза."""

        payload = self._get_json("/containers")
        if not isinstance(payload, list):
            raise GatewayError("Unexpected containers payload")
        try:
            return [ContainerSummary.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError) as exc:
            raise GatewayError(f"Malformed container entry: {exc}") from exc

    def fetch_logs(self, container_id: str) -> str:
        """Возвращает хвост логов контейнера как текст."""

        response = self._get(f"/containers/{quote(container_id, safe='')}/logs")
        return response.text

    # ----------------------------------------------------------------- helpers
    def _get_json(self, path: str) -> Any:
        response = self._get(path)
        try:
            return response.json()
        except ValueError as exc:
            raise GatewayError(f"Invalid JSON from {path}: {exc}") from exc

    def _get(self, path: str) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            LOGGER.error("Gateway request %s failed: %s", url, exc)
            raise GatewayError(str(exc)) from exc
        if not 200 <= response.status_code < 300:
            message = _extract_error(response)
            LOGGER.error("Gateway request %s returned %s: %s", url, response.status_code, message)
            raise GatewayError(message, status_code=response.status_code)
        return response


def _extract_error(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("error"):
        return str(payload["error"])
    return f"HTTP {response.status_code}"
