# src/fishron/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core import replies
from ..core.chat import respond
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState) -> None:
    """Read lines from stdin until bye / EOF / Ctrl+C, printing each framed reply."""
    app_name = str(getattr(state.settings, "app_name", "Fishron"))
    logger.info("Console connector started (tasks=%d).", state.tasks.size())

    print(replies.framed(replies.welcome(app_name)))

    while not state.exiting:
        try:
            user_input = input().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            result = respond(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            print(replies.framed("Internal error while handling a command."))
            continue

        print(replies.framed(result.message))

    logger.info("Console connector finished.")
