#===============================================================================
#  AppLauncher | store.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of the application list (applications.json). The whole list is
#  rewritten on every save.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .models import AppEntry

logger = logging.getLogger(__name__)

LoadErrorCallback = Callable[[str], None]


def _copy_target_mode(tmp_name: str, target: Path) -> None:
    # mkstemp creates 0600 files; keep the store's existing permissions
    if target.exists():
        shutil.copymode(target, tmp_name)
    else:
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_name, 0o666 & ~umask)


class ApplicationStore:
    """JSON persistence for the ordered list of entries.

    Load failures are reported through on_load_error (the window shows a
    dialog); save failures are only logged.
    """

    def __init__(self, store_path: Path, on_load_error: Optional[LoadErrorCallback] = None):
        self.store_path = Path(store_path)
        self.on_load_error = on_load_error

    def load(self) -> List[AppEntry]:
        logger.info("Attempting to load applications.")
        try:
            text = self.store_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Application save file not found at %s. Starting with an empty list.", self.store_path)
            return []
        except Exception as e:
            return self._load_failed(e)

        try:
            data = json.loads(text)
            if not isinstance(data, list):
                raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
        except Exception as e:
            return self._load_failed(e)

        entries: List[AppEntry] = []
        for i, item in enumerate(data):
            if not isinstance(item, dict):
                logger.warning("Skipping element %d in %s: not a JSON object.", i, self.store_path)
                continue
            entries.append(AppEntry.from_dict(item))

        logger.info("Successfully loaded %d applications from %s.", len(entries), self.store_path)
        return entries

    def _load_failed(self, error: Exception) -> List[AppEntry]:
        logger.error("Error loading application list from %s.", self.store_path, exc_info=True)
        if self.on_load_error is not None:
            self.on_load_error(f"Could not load the application list:\n{error}")
        return []

    def save(self, entries: Sequence[AppEntry]) -> bool:
        """Rewrite the store file; returns False (after logging) on failure."""
        logger.info("Attempting to save applications.")
        tmp_name: Optional[str] = None
        try:
            self.store_path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)

            # Write next to the target so os.replace stays on one filesystem
            fd, tmp_name = tempfile.mkstemp(
                prefix=self.store_path.name + ".", suffix=".tmp", dir=str(self.store_path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
            _copy_target_mode(tmp_name, self.store_path)
            os.replace(tmp_name, self.store_path)
            tmp_name = None
        except Exception:
            logger.error("Error saving application list to %s.", self.store_path, exc_info=True)
            return False
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                try:
                    os.remove(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s.", tmp_name)

        logger.info("Successfully saved %d applications to %s.", len(entries), self.store_path)
        return True
