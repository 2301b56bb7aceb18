# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console front-end.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Best-effort final report; every mutation was already written through."""
    err = getattr(state.store, "last_save_error", None)
    if err is not None:
        logger.warning("Last save failed, latest changes may be lost: %s", err)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/task_tracker")
    setup_logging(log_dir=log_dir, console_level=max(console_level, logging.WARNING))

    logger.info("Starting %s...", getattr(settings, "app_name", "task-tracker"))

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    # SIGTERM ends the REPL the same way Ctrl+C does.
    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        raise KeyboardInterrupt

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError, AttributeError):
        # Some platforms may not support SIGTERM, etc.
        pass

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled. Loaded %d task(s); nothing else to run.", len(state.store))
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
