"""Тесты остановки фоновых потоков окна."""

from __future__ import annotations

import logging
from typing import List, Optional

from dockdash.ui.workers import stop_workers


class FakeWorker:
    """Имитирует QThread: завершается во время wait, если finishes=True."""

    def __init__(self, *, running: bool = True, finishes: bool = True) -> None:
        self.running = running
        self.finishes = finishes
        self.interrupted = False
        self.waits: List[Optional[int]] = []

    def isRunning(self) -> bool:
        return self.running

    def requestInterruption(self) -> None:
        self.interrupted = True

    def wait(self, timeout: Optional[int] = None) -> bool:
        self.waits.append(timeout)
        if self.finishes:
            self.running = False
        return not self.running


def test_stop_workers_waits_for_running_fetch() -> None:
    worker = FakeWorker()
    assert stop_workers([worker]) == []
    assert worker.interrupted is True
    assert worker.waits == [None]
    assert worker.isRunning() is False


def test_stop_workers_skips_idle_and_missing() -> None:
    idle = FakeWorker(running=False)
    assert stop_workers([None, idle]) == []
    assert idle.waits == []
    assert idle.interrupted is False


def test_stop_workers_reports_stuck_worker(caplog) -> None:
    stuck = FakeWorker(finishes=False)
    with caplog.at_level(logging.WARNING):
        pending = stop_workers([stuck], timeout_ms=200)
    assert pending == [stuck]
    assert stuck.waits == [200]
    assert "still running" in caplog.text
