# src/fishron/core/chat.py

"""
Core chat orchestration.

This module is front-end agnostic:
- connectors (console, GUI) pass one raw input line to respond(),
- respond() parses, executes and returns a CommandResult,
- connectors decide how to display the text and stop when is_exit is set,
  then call shutdown() for the final save.

Key invariants:
- respond() never raises for bad input; errors come back as reply text,
- a failed save does not roll back the in-memory change (the user is told instead).
"""

from __future__ import annotations

import logging

from ..tasks.task_store import StorageError
from . import replies
from .commands import CommandResult
from .errors import FishronError
from .parser import parse
from .state import AppState

logger = logging.getLogger(__name__)


def respond(state: AppState, line: str) -> CommandResult:
    """Handle one user line and return the reply."""
    try:
        command = parse(line)
        result = command.execute(state)
    except FishronError as e:
        logger.debug("Rejected input %r: %s", line, e)
        return CommandResult(replies.error(str(e)))
    except StorageError as e:
        logger.exception("Failed to save tasks.")
        return CommandResult(replies.error(f"Could not save tasks: {e}"))

    if result.is_exit:
        state.exiting = True
    return result


def shutdown(state: AppState) -> None:
    """Orderly exit: flush the task list once more. Never raises."""
    try:
        state.task_store.save(state.tasks)
        logger.info("Saved %d tasks on shutdown.", state.tasks.size())
    except StorageError:
        logger.exception("Failed to save tasks on shutdown.")

    try:
        state.task_store.close()
    except Exception:
        logger.debug("Task store close failed.", exc_info=True)
