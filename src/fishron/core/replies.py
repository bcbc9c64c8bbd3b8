# src/fishron/core/replies.py

"""Fixed reply templates shared by the console and GUI front-ends."""

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task

LINE = "_" * 60
OOPS = "☹ OOPS!!!"


def welcome(app_name: str) -> str:
    return f"Hello! I'm {app_name}\nWhat can I do for you?"


def farewell() -> str:
    return "Bye. Hope to see you again soon!"


def error(message: str) -> str:
    return f"{OOPS} {message}"


def framed(text: str) -> str:
    """Console framing: the reply between two separator lines."""
    return f"{LINE}\n{text}\n{LINE}"


def _count(n: int) -> str:
    return f"Now you have {n} tasks in the list."


def added(task: Task, size: int) -> str:
    return f"Got it. I've added this task:\n  {task}\n{_count(size)}"


def removed(task: Task, size: int) -> str:
    return f"Noted. I've removed this task:\n  {task}\n{_count(size)}"


def marked(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n  {task}"


def unmarked(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n  {task}"


def invalid_index() -> str:
    return "Invalid task number."


def task_lines(numbered: Iterable[tuple[int, Task]]) -> list[str]:
    return [f"{i}.{t}" for i, t in numbered]


def listing(tasks: list[Task]) -> str:
    if not tasks:
        return "Your task list is empty."
    lines = ["Here are the tasks in your list:"]
    lines.extend(task_lines(enumerate(tasks, start=1)))
    return "\n".join(lines)


def matches(found: list[tuple[int, Task]]) -> str:
    if not found:
        return "No matching tasks found."
    lines = ["Here are the matching tasks in your list:"]
    lines.extend(task_lines(found))
    return "\n".join(lines)
