"""Таблица контейнеров с поиском и кнопками действий в строке."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Sequence

from PySide6 import QtCore, QtGui, QtWidgets

from dockdash.client.state import status_color
from dockdash.docker_api.models import ContainerSummary, format_ports
from dockdash.i18n.translator import translate

STATUS_DOT = "●"


@dataclass(slots=True)
class ColumnDefinition:
    """Описание одной колонки таблицы."""

    header: str
    getter: Callable[[ContainerSummary], Any]

    def render(self, container: ContainerSummary) -> str:
        value = self.getter(container)
        if value is None or value == "":
            return "-"
        return str(value)


@dataclass(slots=True)
class RowAction:
    """Описание действия над строкой таблицы."""

    label: str
    tooltip: str
    callback: Callable[[ContainerSummary], None]


def default_columns() -> List[ColumnDefinition]:
    return [
        ColumnDefinition(translate("containers.column.name"), lambda c: c.name),
        ColumnDefinition(translate("containers.column.image"), lambda c: c.image),
        ColumnDefinition(translate("containers.column.state"), lambda c: c.state),
        ColumnDefinition(
            translate("containers.column.ports"), lambda c: ", ".join(format_ports(c.ports))
        ),
    ]


class ContainersTable(QtWidgets.QWidget):
    """Виджет со строкой поиска и деревом контейнеров."""

    def __init__(
        self,
        *,
        columns: Sequence[ColumnDefinition] | None = None,
        row_actions: Sequence[RowAction] | None = None,
        parent: QtWidgets.QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._columns = list(columns) if columns else default_columns()
        self._row_actions = list(row_actions) if row_actions else []
        self._rows: List[ContainerSummary] = []
        self._default_placeholder = translate("tables.no_data")
        self._placeholder_text = self._default_placeholder
        self._setup_ui()

    # ------------------------------------------------------------------ setup
    def _setup_ui(self) -> None:
        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._search = QtWidgets.QLineEdit()
        self._search.setPlaceholderText(translate("tables.search_placeholder"))
        self._search.setClearButtonEnabled(True)
        self._search.textChanged.connect(self._refresh_view)
        layout.addWidget(self._search)

        headers = [""] + [column.header for column in self._columns]
        if self._row_actions:
            headers.append(translate("tables.actions"))
        self._tree = QtWidgets.QTreeWidget()
        self._tree.setHeaderLabels(headers)
        header = self._tree.header()
        header.setStretchLastSection(True)
        header.setSectionResizeMode(QtWidgets.QHeaderView.ResizeMode.Interactive)
        header.setSectionResizeMode(0, QtWidgets.QHeaderView.ResizeMode.ResizeToContents)
        self._tree.setRootIsDecorated(False)
        self._tree.setUniformRowHeights(True)
        self._tree.setAlternatingRowColors(True)
        self._tree.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        layout.addWidget(self._tree)

    # ----------------------------------------------------------------- data api
    def set_rows(self, rows: Iterable[ContainerSummary]) -> None:
        """Сохраняет и отображает список контейнеров."""

        self._placeholder_text = self._default_placeholder
        self._rows = list(rows)
        self._refresh_view()

    def show_placeholder(self, message: str) -> None:
        """Отображает сообщение вместо данных."""

        self._rows = []
        self._placeholder_text = message or self._default_placeholder
        self._refresh_view()

    # --------------------------------------------------------------- rendering
    def _refresh_view(self) -> None:
        self._tree.clear()
        rows = self._filtered_rows()
        if not rows:
            placeholder = QtWidgets.QTreeWidgetItem(["", self._placeholder_text])
            placeholder.setFlags(QtCore.Qt.ItemFlag.ItemIsEnabled)
            font = placeholder.font(1)
            font.setItalic(True)
            placeholder.setFont(1, font)
            self._tree.addTopLevelItem(placeholder)
            return
        for row in rows:
            self._create_item(row)

    def _create_item(self, row: ContainerSummary) -> None:
        values = [STATUS_DOT] + [column.render(row) for column in self._columns]
        if self._row_actions:
            values.append("")
        item = QtWidgets.QTreeWidgetItem(self._tree, values)
        item.setForeground(0, QtGui.QBrush(QtGui.QColor(status_color(row.state))))
        item.setToolTip(0, row.state)
        item.setData(0, QtCore.Qt.ItemDataRole.UserRole, row.id)
        if self._row_actions:
            self._attach_row_actions(item, row)

    def _attach_row_actions(self, item: QtWidgets.QTreeWidgetItem, row: ContainerSummary) -> None:
        """Добавляет кнопки действий в последнюю колонку."""

        container = QtWidgets.QWidget()
        layout = QtWidgets.QHBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)
        for action in self._row_actions:
            button = QtWidgets.QToolButton()
            button.setText(action.label)
            button.setToolTip(action.tooltip)
            button.clicked.connect(lambda _checked=False, cb=action.callback, r=row: cb(r))
            layout.addWidget(button)
        layout.addStretch()
        self._tree.setItemWidget(item, self._tree.columnCount() - 1, container)

    def _filtered_rows(self) -> List[ContainerSummary]:
        query = self._search.text().strip().lower()
        if not query:
            return list(self._rows)
        return [
            row
            for row in self._rows
            if any(query in column.render(row).lower() for column in self._columns)
        ]
