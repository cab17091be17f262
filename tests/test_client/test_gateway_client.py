"""Тесты HTTP-клиента шлюза на фейковой requests-сессии."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import pytest
import requests

from dockdash.client.api import GatewayClient, GatewayError


def make_response(
    status_code: int, body: Any, *, content_type: str = "application/json"
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, str) and content_type.startswith("text/"):
        response._content = body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.encoding = "utf-8"
    return response


class FakeSession:
    def __init__(self, responses: Dict[str, Any]) -> None:
        self.responses = responses
        self.requested: List[tuple[str, Optional[float]]] = []

    def get(self, url: str, timeout: Optional[float] = None) -> requests.Response:
        self.requested.append((url, timeout))
        result = self.responses[url]
        if isinstance(result, Exception):
            raise result
        return result


CONTAINERS = [
    {
        "id": "f00d",
        "name": "web",
        "image": "nginx:latest",
        "state": "running",
        "ports": [{"private": 80, "public": 8080, "type": "tcp"}],
    },
    {"id": "beef", "name": "job", "image": "busybox", "state": "exited", "ports": []},
]


def test_list_containers_parses_payload() -> None:
    session = FakeSession({"http://gw/api/containers": make_response(200, CONTAINERS)})
    client = GatewayClient("http://gw/api/", session=session)

    rows = client.list_containers()

    assert [row.name for row in rows] == ["web", "job"]
    assert rows[0].ports[0].public == 8080
    assert session.requested == [("http://gw/api/containers", None)]


def test_timeout_is_forwarded() -> None:
    session = FakeSession({"http://gw/api/containers": make_response(200, [])})
    GatewayClient("http://gw/api", timeout=5, session=session).list_containers()
    assert session.requested[0][1] == 5


def test_fetch_logs_returns_text() -> None:
    url = "http://gw/api/containers/f00d/logs"
    session = FakeSession({url: make_response(200, "a\nb\n", content_type="text/plain")})
    assert GatewayClient("http://gw/api", session=session).fetch_logs("f00d") == "a\nb\n"


def test_server_error_carries_gateway_message() -> None:
    payload = {"error": "connect ENOENT", "kind": "runtime_unavailable"}
    session = FakeSession({"http://gw/api/containers": make_response(500, payload)})
    with pytest.raises(GatewayError) as exc_info:
        GatewayClient("http://gw/api", session=session).list_containers()
    assert exc_info.value.message == "connect ENOENT"
    assert exc_info.value.status_code == 500


def test_transport_failure_is_gateway_error() -> None:
    session = FakeSession({"http://gw/api/containers": requests.ConnectionError("refused")})
    with pytest.raises(GatewayError):
        GatewayClient("http://gw/api", session=session).list_containers()


def test_malformed_payload_is_gateway_error() -> None:
    session = FakeSession({"http://gw/api/containers": make_response(200, {"not": "a list"})})
    with pytest.raises(GatewayError):
        GatewayClient("http://gw/api", session=session).list_containers()


def test_non_json_error_body_uses_status() -> None:
    url = "http://gw/api/containers/x/logs"
    session = FakeSession({url: make_response(502, "Bad Gateway", content_type="text/html")})
    with pytest.raises(GatewayError) as exc_info:
        GatewayClient("http://gw/api", session=session).fetch_logs("x")
    assert exc_info.value.message == "HTTP 502"
