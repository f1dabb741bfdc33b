#===============================================================================
#  AppLauncher | app.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Wires logging, the store, the controller and the main window together and
#  runs the Qt event loop.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication

from .constants import APP_TITLE, APP_VERSION
from .controller import LaunchController
from .dialogs import QtInteraction
from .logging_setup import setup_logging
from .main_window import MainWindow
from .paths import default_log_dir, default_store_path
from .store import ApplicationStore

logger = logging.getLogger(__name__)


def build_window(store_path: Optional[Path] = None) -> MainWindow:
    interaction = QtInteraction()
    store = ApplicationStore(
        store_path or default_store_path(),
        on_load_error=lambda message: interaction.show_error("Load error", message),
    )
    controller = LaunchController(store, interaction)
    window = MainWindow(controller)
    interaction.parent = window
    return window


def main() -> int:
    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    app.setApplicationVersion(APP_VERSION)

    setup_logging(default_log_dir())
    logger.info("Application starting. Version: %s", APP_VERSION)

    w = build_window()
    w.show()
    rc = app.exec()

    logger.info("Application exiting.")
    return rc
