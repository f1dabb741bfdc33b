#===============================================================================
#  AppLauncher | system.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  OS-facing helpers: executable version lookup, process start, and
#  "show in folder". Bundled into SystemServices so the controller can be
#  driven with fakes.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from .constants import NOT_AVAILABLE

logger = logging.getLogger(__name__)


def _windows_file_version(file_path: str) -> Optional[str]:
    """Read the version resource of a PE file via pywin32.

    Prefers the FileVersion string of the first translation; falls back to
    the fixed FileVersionMS/LS numbers.
    """
    import win32api  # pywin32, Windows only

    try:
        translations = win32api.GetFileVersionInfo(file_path, "\\VarFileInfo\\Translation")
    except win32api.error:
        translations = []

    for lang, codepage in translations or []:
        key = f"\\StringFileInfo\\{lang:04x}{codepage:04x}\\FileVersion"
        try:
            value = win32api.GetFileVersionInfo(file_path, key)
        except win32api.error:
            continue
        if value:
            return str(value).strip()

    info = win32api.GetFileVersionInfo(file_path, "\\")
    ms, ls = info["FileVersionMS"], info["FileVersionLS"]
    return f"{ms >> 16}.{ms & 0xFFFF}.{ls >> 16}.{ls & 0xFFFF}"


def get_file_version(file_path: Optional[str]) -> str:
    """Version string of an executable, or "N/A" when it cannot be read."""
    if not file_path or not os.path.isfile(file_path):
        logger.warning("Cannot get file version. FilePath is null, empty, or does not exist: '%s'.", file_path)
        return NOT_AVAILABLE

    if not sys.platform.startswith("win"):
        # Only PE files carry a version resource
        return NOT_AVAILABLE

    try:
        version = _windows_file_version(file_path) or NOT_AVAILABLE
    except Exception:
        logger.error("Error getting file version for '%s'.", file_path, exc_info=True)
        return NOT_AVAILABLE

    logger.info("Retrieved file version for '%s': '%s'.", file_path, version)
    return version


def launch(exec_path: str, working_dir: str) -> None:
    """Start exec_path detached, with working_dir as its current directory.

    Windows goes through the shell (file associations, UAC prompt when the
    manifest asks for it). Raises OSError when the process cannot start.
    """
    if sys.platform.startswith("win"):
        os.startfile(exec_path, cwd=working_dir or None)  # type: ignore[attr-defined]
        return
    subprocess.Popen([exec_path], cwd=working_dir or None, start_new_session=True)


def reveal_in_file_manager(file_path: str) -> None:
    """Open the folder containing file_path with the file selected where supported."""
    if sys.platform.startswith("win"):
        subprocess.Popen(["explorer", f"/select,{file_path}"])
    elif sys.platform == "darwin":
        subprocess.Popen(["open", "-R", file_path])
    else:
        # xdg-open has no "select file" mode
        subprocess.Popen(["xdg-open", os.path.dirname(file_path)])


@dataclass
class SystemServices:
    get_file_version: Callable[[Optional[str]], str] = get_file_version
    launch: Callable[[str, str], None] = launch
    reveal_in_file_manager: Callable[[str], None] = reveal_in_file_manager
