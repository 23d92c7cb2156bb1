# tasks/task_errors.py

from __future__ import annotations

from pathlib import Path


class TaskStoreError(RuntimeError):
    """Base class for errors surfaced by the task store to the shell."""


class PersistenceError(TaskStoreError):
    """The task file could not be read or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason} ({self.path})")


class TaskNotFoundError(TaskStoreError, LookupError):
    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task with ID {task_id} not found.")


class InvalidTaskIdError(TaskStoreError, ValueError):
    """User-supplied text is not a positive integer id."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Invalid ID: {raw!r}. Please enter a positive number.")


def parse_task_id(raw: str) -> int:
    text = raw.strip()
    try:
        task_id = int(text)
    except ValueError:
        raise InvalidTaskIdError(text) from None
    if task_id < 1:
        raise InvalidTaskIdError(text)
    return task_id
