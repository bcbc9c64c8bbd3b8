# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from fishron.core.state import AppState
from fishron.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Fishron",
        log_level="WARNING",
        data_dir=tmp_path,
        tasks_path=tmp_path / "fishron.txt",
        log_file=tmp_path / "fishron.log",
        autosave=True,
        gui_width=400,
        gui_height=600,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with the real flat-file TaskStore.

    NOTE: the store's file format is part of what we want to test.
    """
    return AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
        autosave=True,
    )
