# src/fishron/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the flat-file TaskStore into AppState and loads the saved list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    # Never start with an empty list over a file that could not be read.
    try:
        tasks = store.load()
    except OSError:
        logger.exception("Failed to read %s; refusing to start.", store.path)
        raise

    return AppState(
        settings=settings,
        task_store=store,
        tasks=tasks,
        autosave=bool(getattr(settings, "autosave", True)),
    )
