"""Остановка фоновых QThread-задач при закрытии окон."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from PySide6 import QtCore

LOGGER = logging.getLogger(__name__)


def stop_workers(
    workers: Iterable[Optional[QtCore.QThread]], *, timeout_ms: Optional[int] = None
) -> List[QtCore.QThread]:
    """Прерывает и дожидается запущенных потоков.

    Без ``timeout_ms`` ожидание блокирующее. Возвращает потоки, которые так и
    не завершились за отведённое время.
    """

    pending: List[QtCore.QThread] = []
    for worker in workers:
        if worker is None or not worker.isRunning():
            continue
        worker.requestInterruption()
        if timeout_ms is None:
            worker.wait()
        else:
            worker.wait(timeout_ms)
        if worker.isRunning():
            LOGGER.warning("Background worker %r is still running", worker)
            pending.append(worker)
    return pending
