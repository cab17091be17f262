"""Дефолтная схема конфигурации и привязка переменных окружения."""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from dockdash.utils.helpers import normalize_socket_path

DEFAULT_SOCKET = "unix:///var/run/docker.sock"
DEFAULT_API_URL = "http://localhost:4000/api"

# DEFAULT_CONFIG служит шаблоном для начального config.json
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "app": {
        "language": "en",
    },
    "logging": {
        "enabled": True,
        "level": "INFO",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
    "gateway": {
        "host": "0.0.0.0",
        "port": 4000,
        "docker_socket": DEFAULT_SOCKET,
        "log_tail_lines": 10,
        "cors_origins": ["*"],
    },
    "client": {
        "api_url": DEFAULT_API_URL,
        "request_timeout_sec": 0,
    },
}

# Переменная окружения -> (группа, ключ, преобразователь строки)
ENV_OVERRIDES: Dict[str, Tuple[str, str, Callable[[str], Any]]] = {
    "PORT": ("gateway", "port", int),
    "DOCKER_SOCKET": ("gateway", "docker_socket", normalize_socket_path),
    "DOCKDASH_LOG_TAIL": ("gateway", "log_tail_lines", int),
    "DOCKDASH_API_URL": ("client", "api_url", lambda value: value.strip().rstrip("/")),
}
