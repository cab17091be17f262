"""Точки входа: HTTP-шлюз (dockdash-gateway) и клиент (dockdash-client)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Mapping, Optional

from dockdash import __version__
from dockdash.settings.exceptions import SettingsError
from dockdash.settings.registry import SettingsRegistry
from dockdash.utils.logger import configure_logging
from dockdash.utils.paths import resolve_workspace_dir

LOGGER = logging.getLogger(__name__)


def initialize_settings(
    config_path: Path, environ: Optional[Mapping[str, str]] = None
) -> SettingsRegistry:
    """Загружает config.json и применяет переопределения из окружения."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    registry.apply_environment(environ)
    return registry


def setup_logging_from_settings(base_dir: Path, settings: Any, *, log_file_name: str) -> None:
    """Настраивает логирование в соответствии с LoggingSettings."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        log_file_name=log_file_name,
        level_name=logging_settings.get("level", "INFO"),
        max_bytes=logging_settings.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files", 5),
    )


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт рабочую структуру (~/.dockdash, logs)."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / "logs").mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Не удалось инициализировать рабочую директорию: %s", exc)
        return False


def prepare(log_file_name: str) -> tuple[Path, SettingsRegistry] | None:
    """Общая подготовка окружения для обеих точек входа."""

    base_dir = resolve_workspace_dir()
    if not initialize_workdir(base_dir):
        return None
    configure_logging(base_dir / "logs", log_file_name=log_file_name)
    try:
        settings = initialize_settings(base_dir / "config.json")
    except SettingsError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return None
    setup_logging_from_settings(base_dir, settings, log_file_name=log_file_name)
    return base_dir, settings


def run_gateway() -> int:
    """Запускает HTTP-шлюз поверх сокета Docker."""

    from dockdash.docker_api.client import DockerClientWrapper
    from dockdash.docker_api.data_provider import DockerDataProvider
    from dockdash.gateway.app import create_app
    from dockdash.gateway.server import serve

    prepared = prepare("gateway.log")
    if prepared is None:
        return 1
    _, settings = prepared

    client = DockerClientWrapper(settings.get_value("gateway", "docker_socket"))
    provider = DockerDataProvider(client, settings)
    app = create_app(provider, cors_origins=settings.get_value("gateway", "cors_origins"))

    LOGGER.info("Запуск Docker Dashboard Gateway версии %s (%s)", __version__, client.socket_url)
    serve(
        app,
        host=settings.get_value("gateway", "host"),
        port=int(settings.get_value("gateway", "port")),
    )
    return 0


def run_client() -> int:
    """Запускает графический клиент."""

    from dockdash.app import create_application

    prepared = prepare("client.log")
    if prepared is None:
        return 1
    _, settings = prepared

    LOGGER.info("Запуск Docker Dashboard версии %s", __version__)
    app = create_application(settings)
    return app.run()


if __name__ == "__main__":
    sys.exit(run_gateway())
