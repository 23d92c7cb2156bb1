# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the task file's directory exists,
- wires the TaskStore into AppState.

The log directory is owned by logging_setup and only created when file logging is on.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_errors import PersistenceError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    tasks_dir = settings.tasks_path.parent
    try:
        tasks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(
            settings.tasks_path, f"cannot create task directory: {e.strerror or e}"
        ) from e


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    Raises PersistenceError if the task file or its directory is unusable.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
    )
