# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    def mark_completed(self) -> Task:
        return self if self.completed else replace(self, completed=True)

    def to_record(self) -> dict[str, Any]:
        return {"id": self.id, "description": self.description, "completed": self.completed}

    @classmethod
    def from_record(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON object.

        Raises ValueError when a required field is missing or has the wrong type:
        - id: int >= 1 (bool is rejected even though it is an int subclass)
        - description: str
        - completed: bool

        Unknown keys are ignored and are not written back on the next save.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        description = raw.get("description")
        completed = raw.get("completed")

        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 1:
            raise ValueError(f"invalid task id: {task_id!r}")
        if not isinstance(description, str):
            raise ValueError(f"invalid description for task {task_id}")
        if not isinstance(completed, bool):
            raise ValueError(f"invalid completed flag for task {task_id}")

        return cls(id=task_id, description=description, completed=completed)
