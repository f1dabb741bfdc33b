"""Tests for root logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from applauncher.logging_setup import setup_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    for attr in ("_applauncher_logging_configured", "_applauncher_log_file"):
        if hasattr(root, attr):
            delattr(root, attr)
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
    for attr in ("_applauncher_logging_configured", "_applauncher_log_file"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_setup_logging_writes_log_file(tmp_path: Path, clean_root_logger) -> None:
    log_file = setup_logging(tmp_path / "logs")
    assert log_file == tmp_path / "logs" / "applauncher.log"

    logging.getLogger("applauncher.test").info("Application starting.")
    for handler in clean_root_logger.handlers:
        handler.flush()
    assert "Application starting." in log_file.read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(tmp_path: Path, clean_root_logger) -> None:
    first = setup_logging(tmp_path / "logs")
    count = len(clean_root_logger.handlers)
    second = setup_logging(tmp_path / "other")
    assert second == first
    assert len(clean_root_logger.handlers) == count
