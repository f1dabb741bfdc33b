#===============================================================================
#  AppLauncher | controller.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Owns the application list and implements add / remove / configure /
#  rename / launch / open-folder. Every mutation is saved before returning.
#  Dialogs and OS calls go through injected collaborators; UI concerns
#  (widgets, layouts) live in the window layer.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from typing import List, Optional, Protocol

from .commands import Command
from .constants import NEW_ENTRY_NAME
from .models import AppEntry
from .store import ApplicationStore
from .system import SystemServices

logger = logging.getLogger(__name__)


class UserInteraction(Protocol):
    """Modal prompts the controller needs (see dialogs.QtInteraction)."""

    def pick_executable(self, title: str) -> Optional[str]: ...

    def confirm(self, title: str, message: str) -> bool: ...

    def show_error(self, title: str, message: str) -> None: ...

    def show_warning(self, title: str, message: str) -> None: ...


def can_launch(entry: Optional[AppEntry]) -> bool:
    """True when the entry points at an executable that exists right now."""
    return entry is not None and bool(entry.exec_path) and os.path.isfile(entry.exec_path)


def can_open_folder(entry: Optional[AppEntry]) -> bool:
    """True when a containing directory can be derived from exec_path.

    Whether that directory still exists is checked by open_folder itself so
    the user gets a path-not-found warning instead of a dead button.
    """
    return entry is not None and bool(entry.exec_path) and bool(os.path.dirname(entry.exec_path))


class LaunchController:
    def __init__(
        self,
        store: ApplicationStore,
        interaction: UserInteraction,
        system: Optional[SystemServices] = None,
    ):
        self.store = store
        self.interaction = interaction
        self.system = system or SystemServices()
        self.entries: List[AppEntry] = store.load()

        self.add_command = Command(lambda _: self.add_entry())
        self.remove_command = Command(self.remove_entry, lambda e: e is not None)
        self.configure_command = Command(self.configure_entry, lambda e: e is not None)
        self.launch_command = Command(self.launch_entry, can_launch)
        self.open_folder_command = Command(self.open_folder, can_open_folder)

    def save(self) -> bool:
        return self.store.save(self.entries)

    # ----------------------------
    # Collection mutations
    # ----------------------------
    def add_entry(self) -> AppEntry:
        entry = AppEntry(name=NEW_ENTRY_NAME)
        self.entries.append(entry)
        logger.info("Added new application: '%s'.", entry.name)
        self.save()
        return entry

    def remove_entry(self, entry: Optional[AppEntry]) -> bool:
        if entry is None:
            return False

        confirmed = self.interaction.confirm(
            "Confirm removal",
            f"Are you sure you want to remove '{entry.name}'?",
        )
        if not confirmed:
            logger.info("Removal cancelled for application: '%s'.", entry.name)
            return False

        # Identity, not equality: two entries may hold the same values
        for i, candidate in enumerate(self.entries):
            if candidate is entry:
                del self.entries[i]
                break
        else:
            logger.warning("Removal requested for '%s', which is not in the list.", entry.name)
            return False

        logger.info("Removed application: '%s'.", entry.name)
        self.save()
        return True

    def configure_entry(self, entry: Optional[AppEntry]) -> bool:
        """Let the user pick the executable and derive path/version/name from it."""
        if entry is None:
            return False
        old_name = entry.name

        chosen = self.interaction.pick_executable(f"Select the executable for {entry.name}")
        if not chosen:
            logger.info("Executable selection cancelled for '%s'.", entry.name)
            return False

        entry.exec_path = chosen
        entry.version = self.system.get_file_version(chosen)
        entry.path = os.path.dirname(chosen)

        if not entry.name or entry.name == NEW_ENTRY_NAME:
            entry.name = os.path.splitext(os.path.basename(chosen))[0]

        logger.info(
            "Selected executable for '%s': Path='%s', Version='%s', Name set to '%s'.",
            old_name, entry.exec_path, entry.version, entry.name,
        )
        self.save()

        self.launch_command.raise_can_execute_changed()
        self.open_folder_command.raise_can_execute_changed()
        return True

    def rename_entry(self, entry: Optional[AppEntry], name: str) -> bool:
        if entry is None or entry.name == name:
            return False
        old_name = entry.name
        entry.name = name
        logger.info("Renamed application '%s' to '%s'.", old_name, name)
        self.save()
        return True

    # ----------------------------
    # External actions
    # ----------------------------
    def launch_entry(self, entry: Optional[AppEntry]) -> bool:
        if not can_launch(entry):
            logger.warning(
                "Launch attempt failed for '%s': Cannot launch (entry or executable path missing, "
                "or file does not exist). ExecPath: '%s'",
                entry.name if entry else None, entry.exec_path if entry else None,
            )
            return False

        logger.info("Attempting to launch application: '%s' from '%s'.", entry.name, entry.exec_path)
        try:
            self.system.launch(entry.exec_path, os.path.dirname(entry.exec_path))
        except Exception as e:
            logger.error("Error launching application '%s' from '%s'.", entry.name, entry.exec_path, exc_info=True)
            self.interaction.show_error("Launch failed", f"Error launching {entry.name}:\n{e}")
            return False

        logger.info("Successfully launched '%s'.", entry.name)
        return True

    def open_folder(self, entry: Optional[AppEntry]) -> bool:
        if not can_open_folder(entry):
            logger.warning(
                "Open folder attempt failed for '%s': no executable path configured. ExecPath: '%s'",
                entry.name if entry else None, entry.exec_path if entry else None,
            )
            return False

        directory = os.path.dirname(entry.exec_path)
        logger.info("Attempting to open folder for application: '%s' at '%s'.", entry.name, directory)

        if not os.path.isdir(directory):
            logger.warning("Directory not found for '%s': '%s'.", entry.name, directory)
            self.interaction.show_warning("Path not found", f"Path {directory} not found\nfor {entry.name}")
            return False

        try:
            self.system.reveal_in_file_manager(entry.exec_path)
        except Exception as e:
            logger.error("Error opening folder for application '%s' at '%s'.", entry.name, directory, exc_info=True)
            self.interaction.show_error("Folder error", f"Error opening folder for {entry.name}:\n{e}")
            return False

        logger.info("Successfully opened folder for '%s'.", entry.name)
        return True
