# src/tasklist/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import MenuRegistry, Prompt
from ..cli.commands import registry as menu_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Prompt | None = None,
    registry: MenuRegistry | None = None,
) -> None:
    """Show the menu, read a choice, dispatch it; repeat until Exit, EOF or Ctrl+C."""
    read_line = read_line or input
    registry = registry or menu_registry
    logger.info("Console connector started (tasks=%s).", state.task_store.count_tasks())

    while True:
        print(registry.build_menu())
        try:
            choice = read_line("> ").strip()
            if registry.is_exit(choice):
                logger.info("Console exit choice received.")
                break
            reply = registry.handle(state, choice, read_line)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break
        except Exception:
            logger.exception("Menu handler crashed.")
            reply = "Internal error while handling the menu choice."

        if reply is None:
            break
        print(reply)
        print()

    logger.info("Console connector finished.")
