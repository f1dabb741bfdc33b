"""Tests for command bindings."""

from __future__ import annotations

from applauncher.commands import Command


def test_command_without_predicate_is_always_enabled() -> None:
    cmd = Command(lambda p: p)
    assert cmd.can_execute(None) is True
    assert cmd.execute("x") == "x"


def test_predicate_is_evaluated_on_each_call() -> None:
    state = {"ok": False}
    cmd = Command(lambda p: None, lambda p: state["ok"])
    assert cmd.can_execute() is False
    state["ok"] = True
    assert cmd.can_execute() is True


def test_raise_can_execute_changed_notifies_all_subscribers() -> None:
    cmd = Command(lambda p: None)
    calls = []
    cmd.subscribe(lambda: calls.append(1))
    unsubscribe = cmd.subscribe(lambda: calls.append(2))

    cmd.raise_can_execute_changed()
    assert calls == [1, 2]

    unsubscribe()
    cmd.raise_can_execute_changed()
    assert calls == [1, 2, 1]


def test_controller_commands_follow_predicates(controller, tool_exe) -> None:
    entry = controller.add_entry()
    assert controller.launch_command.can_execute(entry) is False
    assert controller.open_folder_command.can_execute(entry) is False
    assert controller.remove_command.can_execute(None) is False
    assert controller.add_command.can_execute(None) is True

    entry.exec_path = str(tool_exe)
    assert controller.launch_command.can_execute(entry) is True
    assert controller.open_folder_command.can_execute(entry) is True
