"""Пакет диалоговых окон."""

from .container_logs import ContainerLogsDialog

__all__ = [
    "ContainerLogsDialog",
]
