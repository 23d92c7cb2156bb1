# tests/test_commands.py

from __future__ import annotations

import os
from collections.abc import Iterable

import pytest

from tasklist.cli.commands import INVALID_CHOICE, MenuRegistry, registry
from tasklist.tasks.task_errors import InvalidTaskIdError, parse_task_id


def answers(*lines: str):
    it: Iterable[str] = iter(lines)

    def prompt(_text: str) -> str:
        return next(it)

    return prompt


def test_menu_registry_routes_and_exit(state) -> None:
    reg = MenuRegistry()
    called = []

    def handler(state, prompt):
        called.append(prompt("q"))
        return "done"

    reg.register("1", "Do", handler)
    reg.register("9", "Quit", None)

    assert reg.handle(state, " 1 ", answers("x")) == "done"
    assert called == ["x"]
    assert reg.handle(state, "9", answers()) is None
    assert reg.is_exit("9")
    assert not reg.is_exit("1")
    assert reg.handle(state, "nope", answers()) == INVALID_CHOICE
    assert reg.build_menu().splitlines()[1:] == ["1. Do", "9. Quit"]


def test_default_menu_layout() -> None:
    assert registry.build_menu().splitlines() == [
        "Task Manager",
        "1. Add Task",
        "2. List Tasks",
        "3. Complete Task",
        "4. Delete Task",
        "5. Exit",
    ]


def test_add_trims_and_list_formats(state) -> None:
    assert registry.handle(state, "1", answers("  buy milk  ")) == "Added task [ID: 1] buy milk"
    registry.handle(state, "1", answers("walk dog"))
    registry.handle(state, "3", answers("1"))

    assert registry.handle(state, "2", answers()) == (
        "✓ [ID: 1] buy milk\n✗ [ID: 2] walk dog"
    )


def test_list_empty(state) -> None:
    assert registry.handle(state, "2", answers()) == "No tasks."


def test_complete_and_delete_report_not_found(state) -> None:
    assert registry.handle(state, "3", answers("5")) == "Task with ID 5 not found."
    assert registry.handle(state, "4", answers("5")) == "Task with ID 5 not found."


def test_invalid_id_is_recoverable(state) -> None:
    state.task_store.add_task("a")

    reply = registry.handle(state, "3", answers("abc"))
    assert reply == "Invalid ID: 'abc'. Please enter a positive number."
    reply = registry.handle(state, "4", answers("-1"))
    assert reply == "Invalid ID: '-1'. Please enter a positive number."
    assert state.task_store.count_tasks() == 1


def test_delete_reply(state) -> None:
    state.task_store.add_task("a")
    assert registry.handle(state, "4", answers("1")) == "Task 1 deleted."
    assert state.task_store.list_tasks() == []


def test_persistence_error_is_reported(state, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_replace(src, dst):
        raise OSError(13, "Permission denied")

    monkeypatch.setattr(os, "replace", broken_replace)

    reply = registry.handle(state, "1", answers("a"))
    assert reply is not None
    assert reply.startswith("Could not save tasks:")
    assert state.task_store.list_tasks() == []


@pytest.mark.parametrize("raw,expected", [("1", 1), (" 42 \n", 42), ("007", 7)])
def test_parse_task_id(raw: str, expected: int) -> None:
    assert parse_task_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "0", "-3"])
def test_parse_task_id_rejects(raw: str) -> None:
    with pytest.raises(InvalidTaskIdError) as exc:
        parse_task_id(raw)
    assert exc.value.raw == raw.strip()
    assert isinstance(exc.value, ValueError)
