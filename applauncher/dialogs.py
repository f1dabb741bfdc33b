#===============================================================================
#  AppLauncher | dialogs.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Qt implementation of the controller's modal prompts (file picker,
#  confirmation, error and warning boxes).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

from .constants import EXECUTABLE_FILTER


class QtInteraction:
    def __init__(self, parent: Optional[QWidget] = None):
        self.parent = parent

    def pick_executable(self, title: str) -> Optional[str]:
        file_path, _ = QFileDialog.getOpenFileName(self.parent, title, "", EXECUTABLE_FILTER)
        return file_path or None

    def confirm(self, title: str, message: str) -> bool:
        res = QMessageBox.question(
            self.parent,
            title,
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return res == QMessageBox.Yes

    def show_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self.parent, title, message)

    def show_warning(self, title: str, message: str) -> None:
        QMessageBox.warning(self.parent, title, message)
