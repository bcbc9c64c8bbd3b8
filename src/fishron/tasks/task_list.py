# src/fishron/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class InvalidIndexError(LookupError):
    """A 1-based task number outside [1, size]."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"task number {index} is out of range (1..{size})")
        self.index = index
        self.size = size


class TaskList:
    """
    Ordered, mutable list of tasks.

    Every public method takes the 1-based number the user sees;
    the conversion to the 0-based position happens only in `_pos`.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _pos(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise InvalidIndexError(index, len(self._tasks))
        return index - 1

    def size(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        return self._tasks[self._pos(index)]

    def remove(self, index: int) -> Task:
        return self._tasks.pop(self._pos(index))

    def mark(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def unmark(self, index: int) -> Task:
        task = self.get(index)
        task.mark_undone()
        return task

    def list(self) -> list[Task]:
        return list(self._tasks)

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Tasks whose description contains `keyword` (case-insensitive), with their numbers."""
        needle = keyword.casefold()
        return [
            (i, t) for i, t in enumerate(self._tasks, start=1) if needle in t.description.casefold()
        ]
