"""Запуск HTTP-шлюза под uvicorn."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

LOGGER = logging.getLogger(__name__)


def serve(app: FastAPI, *, host: str, port: int) -> None:
    """Блокирующий запуск сервера; логирование остаётся за configure_logging."""

    LOGGER.info("Gateway listening on port %s", port)
    uvicorn.run(app, host=host, port=port, log_config=None)
