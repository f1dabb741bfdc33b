#===============================================================================
#  AppLauncher | main_window.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Main window: a table of configured programs (name, folder, version) and a
#  button bar wired to the controller's commands.
#    - Name cells are editable (rename is persisted)
#    - Double-click a row to launch it
#    - Buttons enable/disable from the command predicates
#===============================================================================

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QMainWindow,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from .commands import Command
from .constants import APP_TITLE, APP_VERSION, BUTTON_BAR_SPACING, NOT_AVAILABLE, WINDOW_SIZE
from .controller import LaunchController
from .models import AppEntry


COL_NAME, COL_FOLDER, COL_VERSION = range(3)
HEADERS = ["Name", "Folder", "Version"]


class MainWindow(QMainWindow):
    def __init__(self, controller: LaunchController):
        super().__init__()
        self.controller = controller
        self.setWindowTitle(f"{APP_TITLE} v{APP_VERSION}")
        self.resize(WINDOW_SIZE)

        self._populating = False
        self._unsubscribers: List[Callable[[], None]] = []
        self._bindings: List[Callable[[], None]] = []

        root = QWidget()
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        self.table = QTableWidget(0, len(HEADERS))
        self.table.setHorizontalHeaderLabels(HEADERS)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditKeyPressed | QAbstractItemView.SelectedClicked)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(COL_NAME, QHeaderView.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(COL_FOLDER, QHeaderView.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(COL_VERSION, QHeaderView.ResizeToContents)
        self.table.itemChanged.connect(self._on_item_changed)
        self.table.itemSelectionChanged.connect(self.refresh_buttons)
        self.table.cellDoubleClicked.connect(lambda row, _col: self._launch_row(row))
        layout.addWidget(self.table)

        buttons = QHBoxLayout()
        buttons.setSpacing(BUTTON_BAR_SPACING)
        self.btn_add = QPushButton("Add")
        self.btn_remove = QPushButton("Remove")
        self.btn_configure = QPushButton("Select executable…")
        self.btn_launch = QPushButton("Launch")
        self.btn_open_folder = QPushButton("Open folder")
        for b in (self.btn_add, self.btn_remove, self.btn_configure):
            buttons.addWidget(b)
        buttons.addStretch(1)
        buttons.addWidget(self.btn_open_folder)
        buttons.addWidget(self.btn_launch)
        layout.addLayout(buttons)

        self.bind_button(self.btn_add, controller.add_command, after=lambda: self.rebuild_table(select_last=True))
        self.bind_button(self.btn_remove, controller.remove_command, after=self.rebuild_table)
        self.bind_button(self.btn_configure, controller.configure_command)
        self.bind_button(self.btn_launch, controller.launch_command)
        self.bind_button(self.btn_open_folder, controller.open_folder_command)

        self.rebuild_table()

    # ----------------------------
    # Selection
    # ----------------------------
    def selected_entry(self) -> Optional[AppEntry]:
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return None
        row = rows[0].row()
        if 0 <= row < len(self.controller.entries):
            return self.controller.entries[row]
        return None

    def select_row(self, row: int) -> None:
        if 0 <= row < self.table.rowCount():
            self.table.selectRow(row)

    # ----------------------------
    # Command bindings
    # ----------------------------
    def bind_button(self, button: QPushButton, command: Command, after: Optional[Callable[[], None]] = None) -> None:
        """Run command with the selected entry on click; enable from can_execute."""
        def on_clicked() -> None:
            command.execute(self.selected_entry())
            if after is not None:
                after()
            self.refresh_buttons()

        def refresh() -> None:
            button.setEnabled(command.can_execute(self.selected_entry()))

        button.clicked.connect(on_clicked)
        command.subscribe(refresh)
        self._bindings.append(refresh)

    def refresh_buttons(self) -> None:
        for refresh in self._bindings:
            refresh()

    # ----------------------------
    # Table
    # ----------------------------
    def rebuild_table(self, select_last: bool = False) -> None:
        selected = None if select_last else self.selected_entry()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

        self._populating = True
        try:
            self.table.setRowCount(0)
            for row, entry in enumerate(self.controller.entries):
                self.table.insertRow(row)
                self._fill_row(row, entry)
                self._unsubscribers.append(entry.subscribe(self._on_entry_changed))
        finally:
            self._populating = False

        entries = self.controller.entries
        if selected is not None and selected in entries:
            self.select_row(entries.index(selected))
        elif entries:
            self.select_row(len(entries) - 1)
        self.refresh_buttons()

    def _fill_row(self, row: int, entry: AppEntry) -> None:
        self._set_cell(row, COL_NAME, entry.name, editable=True)
        self.table.item(row, COL_NAME).setToolTip(entry.exec_path or "Not configured")
        self._set_cell(row, COL_FOLDER, entry.path or NOT_AVAILABLE)
        self._set_cell(row, COL_VERSION, entry.version or NOT_AVAILABLE)

    def _set_cell(self, row: int, col: int, text: str, editable: bool = False) -> None:
        # Update in place: the name item may be the one emitting itemChanged
        item = self.table.item(row, col)
        if item is None:
            item = QTableWidgetItem(text)
            if not editable:
                item.setFlags(item.flags() & ~Qt.ItemIsEditable)
            self.table.setItem(row, col, item)
        elif item.text() != text:
            item.setText(text)

    def _on_entry_changed(self, entry: AppEntry, field_name: str) -> None:
        if entry not in self.controller.entries:
            return
        row = self.controller.entries.index(entry)
        self._populating = True
        try:
            self._fill_row(row, entry)
        finally:
            self._populating = False
        if field_name == "is_configured":
            self.refresh_buttons()

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if self._populating or item.column() != COL_NAME:
            return
        row = item.row()
        if 0 <= row < len(self.controller.entries):
            self.controller.rename_entry(self.controller.entries[row], item.text())

    def _launch_row(self, row: int) -> None:
        if 0 <= row < len(self.controller.entries):
            self.controller.launch_command.execute(self.controller.entries[row])
