# tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from .task_errors import PersistenceError, TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskStore:
    """
    JSON-file task store.

    The whole list lives in memory and is written back after every mutation:
    - load once on construction
    - every add/complete/delete re-saves the full list
    - saves go to a sibling temp file first, then os.replace() over the target

    A missing file is an empty list. A malformed file is discarded (with a warning)
    and replaced by the next successful save.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._tasks: list[Task] = []
        self._next_id = 1
        self.load()
        logger.info("TaskStore ready path=%s total=%s", self._path, len(self._tasks))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- persistence ----

    def load(self) -> None:
        """Replace in-memory state with the persisted snapshot."""
        self._tasks = self._read_snapshot()
        # max+1, not count+1: ids are not contiguous after deletes.
        self._next_id = max((t.id for t in self._tasks), default=0) + 1

    def _read_snapshot(self) -> list[Task]:
        if not self._path.exists():
            return []

        try:
            data = self._path.read_bytes()
        except OSError as e:
            raise PersistenceError(self._path, f"cannot read task file: {e.strerror or e}") from e

        try:
            raw = json.loads(data.decode("utf-8"))
            if not isinstance(raw, list):
                raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
            tasks = [Task.from_record(item) for item in raw]
            ids = [t.id for t in tasks]
            if len(set(ids)) != len(ids):
                raise ValueError("duplicate task ids")
        except (ValueError, RecursionError) as e:
            # JSONDecodeError and UnicodeDecodeError are ValueError; deep nesting is RecursionError.
            logger.warning("Discarding malformed task file %s: %s", self._path, e)
            return []

        return tasks

    def save(self) -> None:
        # ASCII escapes keep lone surrogates (surrogateescape stdin) writable and loadable.
        payload = json.dumps([t.to_record() for t in self._tasks], ensure_ascii=True, indent=2)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", encoding="utf-8")
            os.replace(tmp, self._path)
        except (OSError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            reason = e.strerror if isinstance(e, OSError) and e.strerror else e
            raise PersistenceError(self._path, f"cannot write task file: {reason}") from e
        logger.debug("Saved %d tasks to %s", len(self._tasks), self._path)

    def _mutate(self, change: Callable[[], T]) -> T:
        """Apply change() then save; on save failure restore the previous list."""
        before = list(self._tasks)
        result = change()
        try:
            self.save()
        except PersistenceError:
            self._tasks = before
            raise
        return result

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise TaskNotFoundError(task_id)

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def add_task(self, description: str) -> Task:
        task = Task(id=self._next_id, description=description)
        # Never handed out again, even if the save below fails.
        self._next_id += 1

        def change() -> Task:
            self._tasks.append(task)
            return task

        self._mutate(change)
        logger.debug("Task added id=%s", task.id)
        return task

    def complete_task(self, task_id: int) -> Task:
        idx = self._index_of(task_id)

        def change() -> Task:
            done = self._tasks[idx].mark_completed()
            self._tasks[idx] = done
            return done

        task = self._mutate(change)
        logger.debug("Task completed id=%s", task_id)
        return task

    def delete_task(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        task = self._mutate(lambda: self._tasks.pop(idx))
        logger.debug("Task deleted id=%s", task_id)
        return task
