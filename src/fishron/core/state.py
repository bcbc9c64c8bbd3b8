# src/fishron/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    """
    Everything one chat session owns.

    Both front-ends (console, GUI) hold the same kind of AppState
    and pass it to core.chat.respond().
    """

    # Settings object (config.Settings or a SimpleNamespace in tests).
    settings: object

    task_store: TaskRepo
    tasks: TaskList = field(default_factory=TaskList)

    # Save after every mutating command (otherwise only on shutdown).
    autosave: bool = True

    # Set once a command asked to terminate; front-ends stop reading input.
    exiting: bool = False
