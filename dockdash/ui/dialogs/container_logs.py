"""Модальное окно с хвостом логов выбранного контейнера."""

from __future__ import annotations

import logging

from PySide6 import QtCore, QtGui, QtWidgets

from dockdash.client.api import GatewayClient, GatewayError
from dockdash.client.state import LogViewState, LogViewStatus
from dockdash.docker_api.models import ContainerSummary
from dockdash.i18n.translator import translate
from dockdash.ui.workers import stop_workers

LOGGER = logging.getLogger(__name__)


class ContainerLogsDialog(QtWidgets.QDialog):
    """Показывает индикатор загрузки, затем текст логов или заглушку ошибки."""

    def __init__(self, *, client: GatewayClient, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)
        self._client = client
        self._state = LogViewState()
        self._workers: set[LogsFetchThread] = set()  # живут до завершения run

        self._title_label = QtWidgets.QLabel()
        self._busy = QtWidgets.QProgressBar()
        self._text_edit = QtWidgets.QPlainTextEdit()
        self._close_button = QtWidgets.QPushButton(translate("actions.close"))

        self.setWindowTitle(translate("logs.dialog.title"))
        self.setModal(True)
        self.resize(820, 480)
        self._build_ui()

    @property
    def state(self) -> LogViewState:
        return self._state

    def _build_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        font = self._title_label.font()
        font.setBold(True)
        self._title_label.setFont(font)
        layout.addWidget(self._title_label)

        self._busy.setRange(0, 0)  # бесконечный индикатор
        self._busy.setTextVisible(False)
        layout.addWidget(self._busy)

        self._text_edit.setReadOnly(True)
        fixed_font = QtGui.QFontDatabase.systemFont(QtGui.QFontDatabase.SystemFont.FixedFont)
        self._text_edit.setFont(fixed_font)
        self._text_edit.setLineWrapMode(QtWidgets.QPlainTextEdit.LineWrapMode.NoWrap)
        layout.addWidget(self._text_edit)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addStretch()
        self._close_button.clicked.connect(self.accept)
        buttons.addWidget(self._close_button)
        layout.addLayout(buttons)

    # ----------------------------------------------------------------- actions
    def open_for(self, container: ContainerSummary) -> None:
        """Открывает окно и запускает загрузку логов контейнера."""

        self._state.open(container.id)
        self._title_label.setText(translate("logs.dialog.container").format(name=container.name))
        self._render()
        worker = LogsFetchThread(client=self._client, container_id=container.id)
        worker.data_ready.connect(self._on_logs_ready)
        worker.error.connect(self._on_logs_error)
        worker.finished.connect(lambda w=worker: self._workers.discard(w))
        self._workers.add(worker)
        worker.start()
        self.show()

    def stop_background_fetchers(self, *, timeout_ms: int | None = None) -> None:
        """Дожидается незавершённых загрузок логов."""

        stop_workers(list(self._workers), timeout_ms=timeout_ms)

    def done(self, result: int) -> None:
        self._state.close()
        self._text_edit.clear()
        super().done(result)

    def _on_logs_ready(self, container_id: str, text: str) -> None:
        if self._state.show(container_id, text):
            self._render()

    def _on_logs_error(self, container_id: str, message: str) -> None:
        LOGGER.error("Cannot load logs for %s: %s", container_id, message)
        if self._state.fail(container_id, message):
            self._render()

    def _render(self) -> None:
        loading = self._state.status is LogViewStatus.LOADING
        self._busy.setVisible(loading)
        self._text_edit.setVisible(not loading)
        if self._state.status is LogViewStatus.SHOWN_WITH_ERROR:
            self._text_edit.setPlainText(translate("logs.error_placeholder"))
            self._text_edit.setToolTip(self._state.error or "")
        else:
            self._text_edit.setPlainText(self._state.text)
            self._text_edit.setToolTip("")


class LogsFetchThread(QtCore.QThread):
    """Фоновая загрузка логов, чтобы не блокировать интерфейс."""

    data_ready = QtCore.Signal(str, str)
    error = QtCore.Signal(str, str)

    def __init__(self, *, client: GatewayClient, container_id: str) -> None:
        super().__init__()
        self._client = client
        self._container_id = container_id

    def run(self) -> None:
        try:
            text = self._client.fetch_logs(self._container_id)
        except GatewayError as exc:
            self.error.emit(self._container_id, str(exc))
            return
        self.data_ready.emit(self._container_id, text)
