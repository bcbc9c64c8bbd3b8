# src/fishron/core/commands.py

"""
Parsed commands and their execution.

A command is a small immutable value produced by core.parser. Executing it:
- touches the task list at most once (one add / mark / unmark / remove),
- returns a CommandResult with the reply text,
- persists the list through the TaskRepo when something changed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..tasks.task_list import InvalidIndexError, TaskList
from ..tasks.task_models import Task
from . import replies
from .state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    message: str
    is_exit: bool = False
    changed: bool = False


class Command:
    """Base class; subclasses implement apply()."""

    def apply(self, tasks: TaskList) -> CommandResult:
        raise NotImplementedError

    def execute(self, state: AppState) -> CommandResult:
        result = self.apply(state.tasks)
        if result.changed and state.autosave:
            state.task_store.save(state.tasks)
        return result


@dataclass(frozen=True, slots=True)
class AddCommand(Command):
    task: Task

    def apply(self, tasks: TaskList) -> CommandResult:
        tasks.add(self.task)
        logger.debug("Added %s task (size=%d)", self.task.kind.name, tasks.size())
        return CommandResult(replies.added(self.task, tasks.size()), changed=True)


@dataclass(frozen=True, slots=True)
class ListCommand(Command):
    def apply(self, tasks: TaskList) -> CommandResult:
        return CommandResult(replies.listing(tasks.list()))


@dataclass(frozen=True, slots=True)
class MarkCommand(Command):
    index: int

    def apply(self, tasks: TaskList) -> CommandResult:
        try:
            task = tasks.mark(self.index)
        except InvalidIndexError as e:
            logger.debug("mark rejected: %s", e)
            return CommandResult(replies.invalid_index())
        return CommandResult(replies.marked(task), changed=True)


@dataclass(frozen=True, slots=True)
class UnmarkCommand(Command):
    index: int

    def apply(self, tasks: TaskList) -> CommandResult:
        try:
            task = tasks.unmark(self.index)
        except InvalidIndexError as e:
            logger.debug("unmark rejected: %s", e)
            return CommandResult(replies.invalid_index())
        return CommandResult(replies.unmarked(task), changed=True)


@dataclass(frozen=True, slots=True)
class DeleteCommand(Command):
    index: int

    def apply(self, tasks: TaskList) -> CommandResult:
        try:
            task = tasks.remove(self.index)
        except InvalidIndexError as e:
            logger.debug("delete rejected: %s", e)
            return CommandResult(replies.invalid_index())
        return CommandResult(replies.removed(task, tasks.size()), changed=True)


@dataclass(frozen=True, slots=True)
class FindCommand(Command):
    keyword: str

    def apply(self, tasks: TaskList) -> CommandResult:
        return CommandResult(replies.matches(tasks.find(self.keyword)))


@dataclass(frozen=True, slots=True)
class HelpCommand(Command):
    text: str

    def apply(self, tasks: TaskList) -> CommandResult:
        return CommandResult(self.text)


@dataclass(frozen=True, slots=True)
class ExitCommand(Command):
    def apply(self, tasks: TaskList) -> CommandResult:
        return CommandResult(replies.farewell(), is_exit=True)
