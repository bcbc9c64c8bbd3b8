# tests/test_commands.py

from __future__ import annotations

import pytest

from fishron.core.commands import (
    AddCommand,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from fishron.core.state import AppState
from fishron.tasks.task_list import TaskList
from fishron.tasks.task_models import deadline, event, todo

from .fakes import FakeTaskRepo


def _tasks() -> TaskList:
    return TaskList([todo("read book"), deadline("return book", "Sunday"), event("camp", "Mon", "Fri")])


def test_add_echoes_task_and_new_size() -> None:
    tl = TaskList()
    res = AddCommand(todo("read book")).apply(tl)
    assert res.changed is True
    assert res.is_exit is False
    assert res.message == (
        "Got it. I've added this task:\n  [T][ ] read book\nNow you have 1 tasks in the list."
    )
    assert tl.size() == 1


def test_list_numbers_tasks_from_one() -> None:
    res = ListCommand().apply(_tasks())
    assert res.changed is False
    assert res.message.splitlines() == [
        "Here are the tasks in your list:",
        "1.[T][ ] read book",
        "2.[D][ ] return book (by: Sunday)",
        "3.[E][ ] camp (from: Mon to: Fri)",
    ]


def test_list_empty() -> None:
    assert ListCommand().apply(TaskList()).message == "Your task list is empty."


def test_mark_then_unmark() -> None:
    tl = _tasks()
    res = MarkCommand(2).apply(tl)
    assert res.changed is True
    assert res.message == "Nice! I've marked this task as done:\n  [D][X] return book (by: Sunday)"

    res = UnmarkCommand(2).apply(tl)
    assert res.message == "OK, I've marked this task as not done yet:\n  [D][ ] return book (by: Sunday)"
    assert tl.get(2).done is False


@pytest.mark.parametrize("command_cls", [MarkCommand, UnmarkCommand, DeleteCommand])
@pytest.mark.parametrize("index", [0, 4, -3])
def test_invalid_index_leaves_list_untouched(command_cls, index: int) -> None:
    tl = _tasks()
    before = [t.render() for t in tl]

    res = command_cls(index).apply(tl)

    assert res.message == "Invalid task number."
    assert res.changed is False
    assert [t.render() for t in tl] == before


def test_delete_removes_one_and_shifts() -> None:
    tl = _tasks()
    res = DeleteCommand(1).apply(tl)
    assert res.message == (
        "Noted. I've removed this task:\n  [T][ ] read book\nNow you have 2 tasks in the list."
    )
    assert tl.size() == 2
    assert tl.get(1).description == "return book"


def test_find_keeps_list_numbers() -> None:
    res = FindCommand("CAMP").apply(_tasks())
    assert res.message.splitlines() == [
        "Here are the matching tasks in your list:",
        "3.[E][ ] camp (from: Mon to: Fri)",
    ]
    assert FindCommand("zzz").apply(_tasks()).message == "No matching tasks found."


def test_exit_signals_termination() -> None:
    res = ExitCommand().apply(TaskList())
    assert res.is_exit is True
    assert res.message == "Bye. Hope to see you again soon!"


def test_execute_saves_only_after_changes(settings) -> None:
    repo = FakeTaskRepo()
    state = AppState(settings=settings, task_store=repo, tasks=_tasks())

    ListCommand().execute(state)
    MarkCommand(99).execute(state)
    assert repo.saves == []

    MarkCommand(1).execute(state)
    assert repo.saves == [
        ["[T][X] read book", "[D][ ] return book (by: Sunday)", "[E][ ] camp (from: Mon to: Fri)"]
    ]


def test_execute_respects_autosave_off(settings) -> None:
    repo = FakeTaskRepo()
    state = AppState(settings=settings, task_store=repo, autosave=False)

    AddCommand(todo("x")).execute(state)

    assert state.tasks.size() == 1
    assert repo.saves == []
