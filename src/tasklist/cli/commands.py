# src/tasklist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks.task_errors import (
    InvalidTaskIdError,
    PersistenceError,
    TaskNotFoundError,
    parse_task_id,
)
from ..tasks.task_models import Task

Prompt = Callable[[str], str]
MenuHandler = Callable[[AppState, Prompt], str]

MENU_TITLE = "Task Manager"
INVALID_CHOICE = "Invalid choice. Please try again."

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    label: str
    # None marks the entry that ends the session.
    handler: MenuHandler | None


class MenuRegistry:
    """Numbered menu used by the console connector (1. Add Task, ...)."""

    def __init__(self) -> None:
        self._entries: dict[str, MenuEntry] = {}

    def register(self, key: str, label: str, handler: MenuHandler | None) -> None:
        self._entries[key] = MenuEntry(key=key, label=label, handler=handler)

    def is_exit(self, choice: str) -> bool:
        entry = self._entries.get(choice.strip())
        return entry is not None and entry.handler is None

    def handle(self, state: AppState, choice: str, prompt: Prompt) -> str | None:
        """
        Run the handler registered for `choice`.
        Returns the reply text, or None for the exit entry.
        """
        entry = self._entries.get(choice.strip())
        if entry is None:
            return INVALID_CHOICE
        if entry.handler is None:
            return None

        try:
            return entry.handler(state, prompt)
        except PersistenceError as e:
            logger.error("Menu choice %s failed to persist: %s", entry.key, e)
            return f"Could not save tasks: {e}"

    def build_menu(self) -> str:
        lines = [MENU_TITLE]
        for entry in self._entries.values():
            lines.append(f"{entry.key}. {entry.label}")
        return "\n".join(lines)


registry = MenuRegistry()


def format_task(task: Task) -> str:
    status = "✓" if task.completed else "✗"
    return f"{status} [ID: {task.id}] {task.description}"


def cmd_add(state: AppState, prompt: Prompt) -> str:
    description = prompt("Enter task description: ").strip()
    task = state.task_store.add_task(description)
    return f"Added task [ID: {task.id}] {task.description}"


def cmd_list(state: AppState, prompt: Prompt) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks."
    return "\n".join(format_task(t) for t in tasks)


def cmd_complete(state: AppState, prompt: Prompt) -> str:
    try:
        task_id = parse_task_id(prompt("Enter task ID to complete: "))
        task = state.task_store.complete_task(task_id)
    except (InvalidTaskIdError, TaskNotFoundError) as e:
        return str(e)
    return f"Task {task.id} marked as completed."


def cmd_delete(state: AppState, prompt: Prompt) -> str:
    try:
        task_id = parse_task_id(prompt("Enter task ID to delete: "))
        task = state.task_store.delete_task(task_id)
    except (InvalidTaskIdError, TaskNotFoundError) as e:
        return str(e)
    return f"Task {task.id} deleted."


registry.register("1", "Add Task", cmd_add)
registry.register("2", "List Tasks", cmd_list)
registry.register("3", "Complete Task", cmd_complete)
registry.register("4", "Delete Task", cmd_delete)
registry.register("5", "Exit", None)
