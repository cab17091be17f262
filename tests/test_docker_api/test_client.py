"""Тесты обёртки DockerClientWrapper и сопоставления ошибок."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests
from docker.errors import APIError, DockerException, NotFound

from dockdash.docker_api import client as client_module
from dockdash.docker_api.client import DockerClientWrapper, translate_error
from dockdash.docker_api.exceptions import (
    ContainerNotFoundError,
    RuntimeRequestError,
    RuntimeUnavailableError,
)
from fakes import FakeRawClient


def test_socket_path_is_normalized() -> None:
    wrapper = DockerClientWrapper("/var/run/docker.sock", raw_client=FakeRawClient())
    assert wrapper.socket_url == "unix:///var/run/docker.sock"


def test_raw_client_created_once(monkeypatch) -> None:
    created = []

    def fake_docker_client(base_url: str) -> FakeRawClient:
        created.append(base_url)
        return FakeRawClient()

    monkeypatch.setattr(client_module.docker, "DockerClient", fake_docker_client)
    wrapper = DockerClientWrapper("unix:///run/user/1000/docker.sock")
    first = wrapper.get_raw_client()
    assert wrapper.get_raw_client() is first
    assert created == ["unix:///run/user/1000/docker.sock"]


def test_failed_creation_is_retried_on_next_call(monkeypatch) -> None:
    attempts = []

    def flaky_docker_client(base_url: str) -> FakeRawClient:
        attempts.append(base_url)
        if len(attempts) == 1:
            raise DockerException("Error while fetching server API version")
        return FakeRawClient()

    monkeypatch.setattr(client_module.docker, "DockerClient", flaky_docker_client)
    wrapper = DockerClientWrapper("/var/run/docker.sock")
    with pytest.raises(RuntimeUnavailableError):
        wrapper.get_raw_client()
    assert isinstance(wrapper.get_raw_client(), FakeRawClient)
    assert len(attempts) == 2


def test_missing_socket_raises_runtime_unavailable(tmp_path: Path) -> None:
    wrapper = DockerClientWrapper(str(tmp_path / "missing" / "docker.sock"))
    with pytest.raises(RuntimeUnavailableError) as exc_info:
        wrapper.get_raw_client()
    assert exc_info.value.message


def test_ping_reports_availability() -> None:
    raw = FakeRawClient()
    wrapper = DockerClientWrapper("/var/run/docker.sock", raw_client=raw)
    assert wrapper.ping() is True
    raw.reachable = False
    assert wrapper.ping() is False


def test_ping_false_when_client_cannot_be_created(tmp_path: Path) -> None:
    wrapper = DockerClientWrapper(str(tmp_path / "docker.sock"))
    assert wrapper.ping() is False


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (NotFound("No such container: x"), ContainerNotFoundError),
        (APIError("409 Conflict"), RuntimeRequestError),
        (DockerException("boom"), RuntimeRequestError),
        (requests.exceptions.ConnectionError("refused"), RuntimeUnavailableError),
        (FileNotFoundError(2, "No such file or directory"), RuntimeUnavailableError),
    ],
)
def test_translate_error(error: Exception, expected: type) -> None:
    translated = translate_error(error)
    assert isinstance(translated, expected)
    assert translated.message
