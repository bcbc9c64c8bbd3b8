# src/fishron/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_list import TaskList
from .task_models import Task, task_from_record

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Saving the task file failed; the in-memory list is still intact."""


class TaskStore:
    """
    Flat-file task store.

    Layout: UTF-8 text, one task per line, each line a JSON object
    ({"type": "T"|"D"|"E", "done": bool, "description": str, ...}).

    - load() tolerates a missing file (empty list) and skips corrupt lines
    - save() rewrites the whole file via a temp file + os.replace
    """

    def __init__(self, path: str | Path = "data/fishron.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def close(self) -> None:
        """Compatibility hook for shutdown (no open handles are kept)."""
        return

    # ---- encoding ----

    @staticmethod
    def encode_task(task: Task) -> str:
        return json.dumps(task.to_record(), ensure_ascii=False)

    @staticmethod
    def decode_line(line: str) -> Task:
        """Parse one stored line. Raises ValueError if the line is malformed."""
        try:
            rec = json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"invalid JSON: {e.msg}") from e
        except RecursionError as e:
            raise ValueError("invalid JSON: nested too deeply") from e
        return task_from_record(rec)

    # ---- public API ----

    def load(self) -> TaskList:
        if not self._path.exists():
            logger.info("No task file at %s; starting with an empty list.", self._path)
            return TaskList()

        tasks: list[Task] = []
        skipped = 0
        # Bytes in, decode per line: one bad byte must only cost its own line.
        with open(self._path, "rb") as f:
            for lineno, raw in enumerate(f, start=1):
                if not raw.strip():
                    continue
                try:
                    tasks.append(self.decode_line(raw.decode("utf-8").strip()))
                except ValueError as e:
                    skipped += 1
                    logger.warning("Skipping corrupt line %d in %s: %s", lineno, self._path, e)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return TaskList(tasks)

    def save(self, tasks: Iterable[Task]) -> None:
        lines = [self.encode_task(t) + "\n" for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.writelines(lines)
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"{self._path}: {e.strerror or e}") from e
        logger.debug("Saved %d tasks to %s", len(lines), self._path)
