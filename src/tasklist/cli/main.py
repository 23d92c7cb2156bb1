# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), then runs the
console menu in the main thread until the user exits.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_errors import PersistenceError

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    try:
        setup_logging(
            log_dir=settings.data_dir,
            console_level=console_level,
            log_to_file=settings.log_to_file,
        )
    except OSError as e:
        print(f"Cannot open log directory {settings.data_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except PersistenceError as e:
        logger.error("Cannot load tasks: %s", e)
        print(f"Cannot load tasks: {e}", file=sys.stderr)
        sys.exit(1)

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
