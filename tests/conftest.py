"""Общие фикстуры тестов."""

from __future__ import annotations

import pytest

from dockdash.docker_api.client import DockerClientWrapper
from dockdash.docker_api.data_provider import DockerDataProvider
from dockdash.settings.registry import SettingsRegistry
from fakes import DummySettings, FakeRawClient


@pytest.fixture
def raw_client() -> FakeRawClient:
    return FakeRawClient()


@pytest.fixture
def wrapper(raw_client: FakeRawClient) -> DockerClientWrapper:
    return DockerClientWrapper("/var/run/docker.sock", raw_client=raw_client)


@pytest.fixture
def provider(wrapper: DockerClientWrapper) -> DockerDataProvider:
    return DockerDataProvider(wrapper, DummySettings())


@pytest.fixture
def fresh_registry(tmp_path):
    """Новый singleton-реестр, указывающий на временный config.json."""

    SettingsRegistry._instance = None  # type: ignore[attr-defined]
    registry = SettingsRegistry(tmp_path / "config.json")
    registry.reset_to_defaults()
    yield registry
    SettingsRegistry._instance = None  # type: ignore[attr-defined]
