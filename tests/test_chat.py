# tests/test_chat.py

from __future__ import annotations

from fishron.core.chat import respond, shutdown
from fishron.core.state import AppState
from fishron.tasks.task_models import todo
from fishron.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


def test_book_scenario(state: AppState) -> None:
    replies = [
        respond(state, line)
        for line in ["todo read book", "deadline return book /by Sunday", "list", "mark 1", "bye"]
    ]

    listing = replies[2].message.splitlines()
    assert "1.[T][ ] read book" in listing
    assert "2.[D][ ] return book (by: Sunday)" in listing

    assert "[T][X] read book" in replies[3].message

    assert replies[4].is_exit is True
    assert state.exiting is True
    assert not any(r.is_exit for r in replies[:4])


def test_errors_come_back_as_text(state: AppState) -> None:
    res = respond(state, "blah")
    assert res.message == "☹ OOPS!!! I'm sorry, but I don't know what that means :-("
    assert res.is_exit is False
    assert state.exiting is False

    res = respond(state, "todo")
    assert res.message == "☹ OOPS!!! The description of a todo cannot be empty."


def test_out_of_range_index_is_a_reply_not_an_error(state: AppState) -> None:
    respond(state, "todo a")
    for line in ("mark 0", "mark 2", "unmark 5", "delete 2"):
        assert respond(state, line).message == "Invalid task number."
    assert state.tasks.size() == 1
    assert state.tasks.get(1).done is False


def test_autosave_writes_after_each_change(state: AppState) -> None:
    path = state.settings.tasks_path
    respond(state, "todo read book")
    assert len(path.read_text("utf-8").splitlines()) == 1

    respond(state, "delete 1")
    assert path.read_text("utf-8") == ""


def test_save_failure_is_reported_and_memory_kept(settings) -> None:
    state = AppState(settings=settings, task_store=FakeTaskRepo(fail_on_save=True))

    res = respond(state, "todo read book")

    assert res.message.startswith("☹ OOPS!!! Could not save tasks")
    assert state.tasks.size() == 1


def test_shutdown_flushes_and_closes(settings) -> None:
    repo = FakeTaskRepo()
    state = AppState(settings=settings, task_store=repo, autosave=False)
    state.tasks.add(todo("read book"))

    shutdown(state)

    assert repo.saves == [["[T][ ] read book"]]
    assert repo.closed is True


def test_shutdown_never_raises(settings) -> None:
    state = AppState(settings=settings, task_store=FakeTaskRepo(fail_on_save=True))
    shutdown(state)


def test_tasks_survive_a_restart(state: AppState) -> None:
    respond(state, "todo read book")
    respond(state, "event camp /from Mon /to Fri")
    respond(state, "mark 2")
    shutdown(state)

    reloaded = TaskStore(state.settings.tasks_path).load()
    assert [t.render() for t in reloaded] == [
        "[T][ ] read book",
        "[E][X] camp (from: Mon to: Fri)",
    ]


def test_huge_index_gets_a_reply(state: AppState) -> None:
    respond(state, "todo a")
    res = respond(state, "mark " + "9" * 5000)
    assert res.message.startswith("☹ OOPS!!!")
    assert "not a valid task number" in res.message
    assert state.tasks.get(1).done is False
