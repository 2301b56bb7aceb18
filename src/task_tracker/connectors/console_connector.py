# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import current_view
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import TaskChange

logger = logging.getLogger(__name__)


class ConsoleView:
    """
    Re-renders the task list after store changes.

    Subscribed to TaskStore; a change only marks the view dirty, and the
    loop flushes it after the command reply has been printed.
    """

    def __init__(self, state: AppState, write: Callable[[str], None] = print) -> None:
        self._state = state
        self._write = write
        self.dirty = False

    def on_change(self, change: TaskChange) -> None:
        logger.debug("Store changed kind=%s id=%s persisted=%s", change.kind, change.task_id, change.persisted)
        self.dirty = True

    def flush(self) -> None:
        if not self.dirty:
            return
        self.dirty = False
        self._write(current_view(self._state))


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started (tasks=%s).", len(state.store))
    app_name = str(getattr(state.settings, "app_name", "task-tracker"))

    view = ConsoleView(state, write)
    unsubscribe = state.store.subscribe(view.on_change)

    write(f"[{app_name}] Use /help for commands. Use /exit to quit.")
    write(current_view(state))

    try:
        while True:
            try:
                user_input = read(">>> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            try:
                reply = command_registry.handle(state, user_input, emit=write)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is None:
                reply = "Not a command. Use /add YYYY-MM-DD [priority] <text> to add a task, /help for more."

            write(reply)
            view.flush()
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
