#===============================================================================
#  AppLauncher | commands.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  UI-invocable actions with an "is it allowed right now" check. Widgets are
#  bound in main_window; this module has no Qt dependency.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Any, Callable, List, Optional


class Command:
    """An action plus an optional predicate deciding whether it is enabled.

    The predicate is evaluated on every can_execute() call. Call
    raise_can_execute_changed() when something it depends on has changed so
    bound widgets re-query it.
    """

    def __init__(
        self,
        execute: Callable[[Any], Any],
        can_execute: Optional[Callable[[Any], bool]] = None,
    ):
        self._execute = execute
        self._can_execute = can_execute
        self._listeners: List[Callable[[], None]] = []

    def can_execute(self, parameter: Any = None) -> bool:
        return self._can_execute is None or bool(self._can_execute(parameter))

    def execute(self, parameter: Any = None) -> Any:
        return self._execute(parameter)

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def raise_can_execute_changed(self) -> None:
        for cb in list(self._listeners):
            cb()
