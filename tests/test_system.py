"""Tests for the OS helpers (portable paths only)."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from applauncher import system
from applauncher.constants import NOT_AVAILABLE


def test_get_file_version_missing_or_empty_is_not_available(tmp_path: Path) -> None:
    assert system.get_file_version(None) == NOT_AVAILABLE
    assert system.get_file_version("") == NOT_AVAILABLE
    assert system.get_file_version(str(tmp_path / "nope.exe")) == NOT_AVAILABLE


@pytest.mark.skipif(sys.platform.startswith("win"), reason="non-Windows has no version resource")
def test_get_file_version_non_windows_is_not_available(tmp_path: Path) -> None:
    exe = tmp_path / "tool.exe"
    exe.write_bytes(b"MZ")
    assert system.get_file_version(str(exe)) == NOT_AVAILABLE


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Windows uses os.startfile")
def test_launch_sets_working_directory(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(subprocess, "Popen", lambda cmd, **kw: calls.append((cmd, kw)))

    system.launch("/opt/tool/run", "/opt/tool")

    cmd, kw = calls[0]
    assert cmd == ["/opt/tool/run"]
    assert kw["cwd"] == "/opt/tool"
    assert kw["start_new_session"] is True


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="xdg-open branch")
def test_reveal_opens_containing_directory_on_linux(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(subprocess, "Popen", lambda cmd, **kw: calls.append(cmd))

    system.reveal_in_file_manager("/opt/tool/run")
    assert calls == [["xdg-open", "/opt/tool"]]


def test_launch_error_propagates(monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise FileNotFoundError("missing")

    monkeypatch.setattr(subprocess, "Popen", boom)
    if sys.platform.startswith("win"):
        monkeypatch.setattr(system.os, "startfile", boom, raising=False)

    with pytest.raises(OSError):
        system.launch("/opt/tool/run", "/opt/tool")


def test_system_services_defaults_to_module_functions() -> None:
    services = system.SystemServices()
    assert services.launch is system.launch
    assert services.get_file_version is system.get_file_version
