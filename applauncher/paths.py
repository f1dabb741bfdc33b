#===============================================================================
#  AppLauncher | paths.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Resolves the per-user application data folder that holds the store file
#  and the log folder.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import sys
from pathlib import Path

from .constants import APP_DATA_FOLDER_NAME, LOGS_FOLDER_NAME, STORE_FILE_NAME


def user_data_base() -> Path:
    """Platform folder for per-user application data (roaming on Windows)."""
    if sys.platform.startswith("win"):
        return Path(os.getenv("APPDATA", str(Path.home() / "AppData" / "Roaming")))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.getenv("XDG_CONFIG_HOME", str(Path.home() / ".config")))


def app_data_dir() -> Path:
    return user_data_base() / APP_DATA_FOLDER_NAME


def default_store_path() -> Path:
    return app_data_dir() / STORE_FILE_NAME


def default_log_dir() -> Path:
    return app_data_dir() / LOGS_FOLDER_NAME
