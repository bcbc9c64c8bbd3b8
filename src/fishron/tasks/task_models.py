# src/fishron/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

# Accepted date/time spellings for /by, /from and /to markers (tried in order).
# The bool says whether the format carries a time of day.
WHEN_FORMATS: tuple[tuple[str, bool], ...] = (
    ("%Y-%m-%d %H%M", True),
    ("%Y-%m-%d %H:%M", True),
    ("%Y-%m-%d", False),
    ("%d/%m/%Y %H%M", True),
    ("%d/%m/%Y %H:%M", True),
    ("%d/%m/%Y", False),
)


class TaskKind(StrEnum):
    """Task variant tag; the value doubles as the one-letter badge and record type."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @classmethod
    def from_record(cls, raw: Any) -> TaskKind:
        try:
            return cls(str(raw).upper())
        except ValueError:
            raise ValueError(f"unknown task type: {raw!r}") from None


def parse_when(text: str) -> tuple[datetime, bool] | None:
    """Return (datetime, has_time) if `text` is a recognised date, else None."""
    s = " ".join(text.split())
    for fmt, has_time in WHEN_FORMATS:
        try:
            return datetime.strptime(s, fmt), has_time
        except ValueError:
            continue
    return None


def format_when(text: str) -> str:
    """Human form of a marker: 'Oct 15 2019' / 'Oct 15 2019 6:00pm', or the raw text."""
    parsed = parse_when(text)
    if parsed is None:
        return text
    dt, has_time = parsed
    out = f"{dt:%b} {dt.day} {dt.year}"
    if has_time:
        hour = dt.hour % 12 or 12
        out += f" {hour}:{dt:%M}{'am' if dt.hour < 12 else 'pm'}"
    return out


@dataclass(slots=True)
class Task:
    """
    One tracked task.

    A single record type tagged by `kind`:
    - TODO uses only description/done
    - DEADLINE adds `by`
    - EVENT adds `start` and `end`
    """

    kind: TaskKind
    description: str
    done: bool = False
    by: str | None = None
    start: str | None = None
    end: str | None = None

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")
        if self.kind is TaskKind.DEADLINE and not (self.by and self.by.strip()):
            raise ValueError("deadline requires 'by'")
        if self.kind is TaskKind.EVENT and not (
            self.start and self.start.strip() and self.end and self.end.strip()
        ):
            raise ValueError("event requires 'start' and 'end'")

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    def render(self) -> str:
        return render_task(self)

    def __str__(self) -> str:
        return render_task(self)

    def to_record(self) -> dict[str, Any]:
        rec: dict[str, Any] = {
            "type": self.kind.value,
            "done": self.done,
            "description": self.description,
        }
        if self.kind is TaskKind.DEADLINE:
            rec["by"] = self.by
        elif self.kind is TaskKind.EVENT:
            rec["from"] = self.start
            rec["to"] = self.end
        return rec


def todo(description: str) -> Task:
    return Task(TaskKind.TODO, description)


def deadline(description: str, by: str) -> Task:
    return Task(TaskKind.DEADLINE, description, by=by)


def event(description: str, start: str, end: str) -> Task:
    return Task(TaskKind.EVENT, description, start=start, end=end)


def render_task(task: Task) -> str:
    box = "X" if task.done else " "
    head = f"[{task.kind.value}][{box}] {task.description}"
    if task.kind is TaskKind.DEADLINE:
        return f"{head} (by: {format_when(task.by or '')})"
    if task.kind is TaskKind.EVENT:
        return f"{head} (from: {format_when(task.start or '')} to: {format_when(task.end or '')})"
    return head


def task_from_record(rec: Any) -> Task:
    """
    Rebuild a Task from its persisted dict.

    Raises ValueError on anything malformed (the store decides what to do with it).
    """
    if not isinstance(rec, dict):
        raise ValueError("record is not an object")

    kind = TaskKind.from_record(rec.get("type"))
    description = rec.get("description")
    if not isinstance(description, str):
        raise ValueError("description must be a string")
    done = rec.get("done", False)
    if not isinstance(done, bool):
        raise ValueError("done must be a boolean")

    def _str_field(name: str) -> str:
        val = rec.get(name)
        if not isinstance(val, str):
            raise ValueError(f"{name!r} must be a string")
        return val

    if kind is TaskKind.DEADLINE:
        return Task(kind, description, done, by=_str_field("by"))
    if kind is TaskKind.EVENT:
        return Task(kind, description, done, start=_str_field("from"), end=_str_field("to"))
    return Task(kind, description, done)
