# src/fishron/cli/main.py

"""
CLI entrypoints.

Initializes logging, builds AppState, then runs one front-end until the user says bye:
- `fishron`      -> console REPL
- `fishron-gui`  -> chat window

Both end with the same orderly shutdown (final save).
"""

from __future__ import annotations

import logging
import signal
import sys
from collections.abc import Callable

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..core.chat import shutdown
from ..core.state import AppState
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def _run(front_end: Callable[[AppState], None]) -> None:
    settings = get_settings()

    setup_logging(log_file=settings.log_file, console_level=level_from_name(settings.log_level))

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except OSError as e:
        print(f"Cannot read {settings.tasks_path}: {e.strerror or e}", file=sys.stderr)
        raise SystemExit(1) from e

    # SIGTERM behaves like Ctrl+C so the finally-block still saves.
    try:
        signal.signal(signal.SIGTERM, signal.default_int_handler)
    except (ValueError, OSError, AttributeError):
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    try:
        front_end(state)
    finally:
        shutdown(state)
        logger.info("Bye.")


def main() -> None:
    from ..connectors.console_connector import run_console_loop

    _run(run_console_loop)


def main_gui() -> None:
    from ..connectors.gui_connector import run_gui

    _run(run_gui)


if __name__ == "__main__":
    main()
