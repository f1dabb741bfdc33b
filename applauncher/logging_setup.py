#===============================================================================
#  AppLauncher | logging_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Root logging setup: console + UTF-8 log file under the app data folder.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .constants import LOG_FILE_NAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def setup_logging(log_dir: Path, level: int = logging.INFO) -> Optional[Path]:
    """Configure the root logger once and return the log file path.

    Calling it again is a no-op. If the log file cannot be opened the app
    keeps running with console logging only and None is returned.
    """
    root = logging.getLogger()
    if getattr(root, "_applauncher_logging_configured", False):
        return getattr(root, "_applauncher_log_file", None)

    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    log_file: Optional[Path] = Path(log_dir) / LOG_FILE_NAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    except OSError as e:
        root.error("Failed to open log file %s: %s", log_file, e)
        log_file = None

    root._applauncher_logging_configured = True  # type: ignore[attr-defined]
    root._applauncher_log_file = log_file  # type: ignore[attr-defined]
    return log_file
