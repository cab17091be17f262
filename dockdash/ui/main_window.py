"""Главное окно: список контейнеров шлюза и просмотр логов."""

from __future__ import annotations

import logging
from typing import List

from PySide6 import QtCore, QtGui, QtWidgets

from dockdash.client.api import GatewayClient, GatewayError
from dockdash.client.state import ContainerListState, ListStatus
from dockdash.docker_api.models import ContainerSummary
from dockdash.i18n.translator import translate
from dockdash.ui.dialogs.container_logs import ContainerLogsDialog
from dockdash.ui.widgets.tables import ContainersTable, RowAction
from dockdash.ui.workers import stop_workers


class DashboardWindow(QtWidgets.QMainWindow):
    """Окно со списком контейнеров, ручным обновлением и окном логов."""

    def __init__(self, *, client: GatewayClient) -> None:
        super().__init__()
        self._logger = logging.getLogger(__name__)
        self._client = client
        self._list_state = ContainerListState()
        self._refresh_worker: ContainersFetchThread | None = None

        self._refresh_button = QtWidgets.QPushButton(translate("actions.refresh"))
        self._refresh_button.setToolTip(translate("actions.refresh_tooltip"))
        self._busy = QtWidgets.QProgressBar()
        self._status_label = QtWidgets.QLabel()
        self._table = ContainersTable(
            row_actions=[
                RowAction(
                    label=translate("containers.actions.logs"),
                    tooltip=translate("containers.actions.logs_tooltip"),
                    callback=self._open_logs,
                )
            ]
        )
        self._logs_dialog = ContainerLogsDialog(client=client, parent=self)

        self._setup_window()
        self._apply_hotkeys()
        self.refresh()

    # ------------------------------------------------------------------- setup
    def _setup_window(self) -> None:
        self.setWindowTitle(translate("app.title"))
        self.resize(1100, 700)

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)

        top_panel = QtWidgets.QHBoxLayout()
        title = QtWidgets.QLabel(translate("containers.title"))
        font = title.font()
        font.setPointSize(font.pointSize() + 6)
        font.setBold(True)
        title.setFont(font)
        top_panel.addWidget(title)
        top_panel.addStretch()
        self._refresh_button.clicked.connect(self.refresh)
        top_panel.addWidget(self._refresh_button)
        layout.addLayout(top_panel)

        self._busy.setRange(0, 0)
        self._busy.setTextVisible(False)
        layout.addWidget(self._busy)
        layout.addWidget(self._table)
        self.setCentralWidget(central)

        status_bar = QtWidgets.QStatusBar()
        status_bar.addPermanentWidget(self._status_label)
        self.setStatusBar(status_bar)
        self._status_label.setText(self._client.base_url)

    def _apply_hotkeys(self) -> None:
        refresh_shortcut = QtGui.QShortcut(QtGui.QKeySequence("F5"), self)
        refresh_shortcut.activated.connect(self.refresh)
        quit_shortcut = QtGui.QShortcut(QtGui.QKeySequence("Ctrl+Q"), self)
        quit_shortcut.activated.connect(self.close)

    # ----------------------------------------------------------------- actions
    def refresh(self) -> None:
        """Перезагружает список; новый запрос не стартует, пока идёт предыдущий."""

        if self._refresh_worker is not None:
            return
        self._list_state.begin_refresh()
        self._render_list()
        worker = ContainersFetchThread(client=self._client)
        worker.data_ready.connect(self._on_containers_ready)
        worker.error.connect(self._on_containers_error)
        worker.finished.connect(self._on_refresh_finished)
        self._refresh_worker = worker
        worker.start()

    def _on_containers_ready(self, containers: List[ContainerSummary]) -> None:
        self._list_state.finish(containers)
        self._logger.info("Loaded %s containers from %s", len(containers), self._client.base_url)
        self._render_list()

    def _on_containers_error(self, message: str) -> None:
        self._logger.error("Cannot load containers: %s", message)
        self._list_state.fail(message)
        self._render_list()

    def _on_refresh_finished(self) -> None:
        worker = self._refresh_worker
        self._refresh_worker = None
        if worker is not None:
            worker.deleteLater()

    def _open_logs(self, container: ContainerSummary) -> None:
        self._logs_dialog.open_for(container)

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self._logs_dialog.stop_background_fetchers()
        stop_workers([self._refresh_worker])
        super().closeEvent(event)

    def _render_list(self) -> None:
        loading = self._list_state.is_loading
        self._busy.setVisible(loading)
        self._refresh_button.setEnabled(not loading)
        if loading:
            return
        if self._list_state.status is ListStatus.EMPTY_ON_ERROR:
            self._table.show_placeholder(translate("containers.load_error"))
            self.statusBar().showMessage(self._list_state.error or "", 10000)
            return
        self._table.set_rows(self._list_state.containers)
        self.statusBar().clearMessage()


def create_main_window(*, client: GatewayClient) -> DashboardWindow:
    """Фабрика главного окна."""

    return DashboardWindow(client=client)


class ContainersFetchThread(QtCore.QThread):
    """Фоновая загрузка списка контейнеров для разгрузки UI."""

    data_ready = QtCore.Signal(list)
    error = QtCore.Signal(str)

    def __init__(self, *, client: GatewayClient) -> None:
        super().__init__()
        self._client = client

    def run(self) -> None:
        try:
            containers = self._client.list_containers()
        except GatewayError as exc:
            self.error.emit(str(exc))
            return
        self.data_ready.emit(containers)
