# src/fishron/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations,
so tests can swap the flat-file store for an in-memory fake.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-list persistence: read everything at start, rewrite everything on save."""

    def load(self) -> TaskList: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
    def close(self) -> None: ...
