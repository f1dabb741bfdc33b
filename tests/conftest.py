"""Shared pytest fixtures: fake collaborators and a temp store."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeInteraction:
    """Records prompts and answers them from preset values."""

    def __init__(self) -> None:
        self.picked_path: Optional[str] = None
        self.confirm_answer = True
        self.picks: List[str] = []
        self.confirms: List[Tuple[str, str]] = []
        self.errors: List[Tuple[str, str]] = []
        self.warnings: List[Tuple[str, str]] = []

    def pick_executable(self, title: str) -> Optional[str]:
        self.picks.append(title)
        return self.picked_path

    def confirm(self, title: str, message: str) -> bool:
        self.confirms.append((title, message))
        return self.confirm_answer

    def show_error(self, title: str, message: str) -> None:
        self.errors.append((title, message))

    def show_warning(self, title: str, message: str) -> None:
        self.warnings.append((title, message))


class FakeSystem:
    def __init__(self) -> None:
        self.version = "1.2.3.4"
        self.launch_error: Optional[Exception] = None
        self.reveal_error: Optional[Exception] = None
        self.launched: List[Tuple[str, str]] = []
        self.revealed: List[str] = []

    def get_file_version(self, file_path: Optional[str]) -> str:
        return self.version

    def launch(self, exec_path: str, working_dir: str) -> None:
        if self.launch_error is not None:
            raise self.launch_error
        self.launched.append((exec_path, working_dir))

    def reveal_in_file_manager(self, file_path: str) -> None:
        if self.reveal_error is not None:
            raise self.reveal_error
        self.revealed.append(file_path)


@pytest.fixture
def interaction() -> FakeInteraction:
    return FakeInteraction()


@pytest.fixture
def fake_system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "AppLauncher" / "applications.json"


@pytest.fixture
def store(store_path: Path, interaction: FakeInteraction):
    from applauncher.store import ApplicationStore

    return ApplicationStore(store_path, on_load_error=lambda msg: interaction.show_error("Load error", msg))


@pytest.fixture
def controller(store, interaction: FakeInteraction, fake_system: FakeSystem):
    from applauncher.controller import LaunchController

    return LaunchController(store, interaction, fake_system)


@pytest.fixture
def tool_exe(tmp_path: Path) -> Path:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    exe = bin_dir / "tool.exe"
    exe.write_bytes(b"MZ")
    return exe


@pytest.fixture
def qt_app():
    pytest.importorskip("PySide6")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
