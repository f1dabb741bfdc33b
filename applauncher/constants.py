#===============================================================================
#  AppLauncher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for window sizing, placeholder values, and file/folder
#  naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from PySide6.QtCore import QSize

APP_TITLE = "AppLauncher"
APP_VERSION = "1.0.0"

APP_DATA_FOLDER_NAME = "AppLauncher"
STORE_FILE_NAME = "applications.json"
LOGS_FOLDER_NAME = "logs"
LOG_FILE_NAME = "applauncher.log"

# Placeholder shown for fields that have not been derived yet
NOT_AVAILABLE = "N/A"

# Name given to entries created via "Add". Also the marker that lets
# configure_entry replace the name with the executable's base name, so it
# must stay fixed and never be translated.
NEW_ENTRY_NAME = "Nowy program"

EXECUTABLE_FILTER = "Executable files (*.exe);;All files (*.*)"

WINDOW_SIZE = QSize(760, 420)
BUTTON_BAR_SPACING = 8
