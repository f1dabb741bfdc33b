#===============================================================================
#  AppLauncher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  The launchable application record. Every field change is announced to
#  subscribers so the window can redraw the affected row.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .constants import NOT_AVAILABLE

ChangeCallback = Callable[["AppEntry", str], None]


class AppEntry:
    """One launchable application (configured or not).

    path and version are derived from exec_path by the controller; they are
    plain settable fields here so the store can restore them.
    """

    def __init__(
        self,
        name: str = NOT_AVAILABLE,
        path: str = NOT_AVAILABLE,
        version: str = NOT_AVAILABLE,
        exec_path: Optional[str] = None,
    ):
        self._name = name
        self._path = path
        self._version = version
        self._exec_path = exec_path
        self._subscribers: List[ChangeCallback] = []

    # ----------------------------
    # Change notification
    # ----------------------------
    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register callback(entry, field_name); returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, field_name: str) -> None:
        for cb in list(self._subscribers):
            cb(self, field_name)

    def _set_field(self, attr: str, field_name: str, value: Any) -> bool:
        if getattr(self, attr) == value:
            return False
        setattr(self, attr, value)
        self._notify(field_name)
        return True

    # ----------------------------
    # Fields
    # ----------------------------
    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._set_field("_name", "name", value)

    @property
    def path(self) -> str:
        return self._path

    @path.setter
    def path(self, value: str) -> None:
        self._set_field("_path", "path", value)

    @property
    def version(self) -> str:
        return self._version

    @version.setter
    def version(self, value: str) -> None:
        self._set_field("_version", "version", value)

    @property
    def exec_path(self) -> Optional[str]:
        return self._exec_path

    @exec_path.setter
    def exec_path(self, value: Optional[str]) -> None:
        if self._set_field("_exec_path", "exec_path", value):
            self._notify("is_configured")

    @property
    def is_configured(self) -> bool:
        return bool(self._exec_path)

    # ----------------------------
    # JSON form
    # ----------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "path": self._path,
            "version": self._version,
            "execPath": self._exec_path,
        }

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "AppEntry":
        """Build an entry from its JSON object; unknown keys are ignored."""
        def text(key: str) -> str:
            value = d.get(key)
            return value if isinstance(value, str) else NOT_AVAILABLE

        exec_path = d.get("execPath")
        return AppEntry(
            name=text("name"),
            path=text("path"),
            version=text("version"),
            exec_path=exec_path if isinstance(exec_path, str) else None,
        )

    def __repr__(self) -> str:
        return f"AppEntry(name={self._name!r}, exec_path={self._exec_path!r})"
