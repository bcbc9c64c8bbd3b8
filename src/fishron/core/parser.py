# src/fishron/core/parser.py

"""
Command parser: one raw input line -> one Command (or FishronError).

Rules:
- keywords are tried in a fixed order (todo, deadline, event, list, mark,
  unmark, delete, find, help, bye); the first case-insensitive prefix wins
- list, help and bye must be the whole line
- arguments are tokenized on whitespace and re-joined with single spaces
- /by, /from, /to are delimiters only as standalone words; write //by (etc.)
  to get the literal text "/by" inside a description
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from ..tasks.task_models import deadline, event, todo
from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from .errors import FishronError

CommandParser = Callable[[list[str]], Command]

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"^[+-]?\d+$")
MAX_INDEX_DIGITS = 18

BY = "/by"
FROM = "/from"
TO = "/to"


def _unescape(token: str) -> str:
    return token[1:] if token.startswith("//") else token


def split_segments(tokens: list[str], delimiters: tuple[str, ...] = ()) -> dict[str, str]:
    """
    Split argument tokens on standalone delimiter words.

    Returns {"": <text before any delimiter>, "/by": <text after /by>, ...}
    in the order the delimiters appeared. A delimiter may appear only once.
    """
    parts: dict[str, list[str]] = {"": []}
    current = ""
    for tok in tokens:
        low = tok.lower()
        if low in delimiters:
            if low in parts:
                raise FishronError(f"'{low}' can only appear once.")
            parts[low] = []
            current = low
            continue
        parts[current].append(_unescape(tok))
    return {k: " ".join(v) for k, v in parts.items()}


def _parse_index(keyword: str, args: list[str]) -> int:
    if not args:
        raise FishronError(f"Please provide a task number, e.g. '{keyword} 2'.")
    if len(args) > 1:
        raise FishronError(f"'{keyword}' takes exactly one task number.")
    raw = args[0]
    if not _INDEX_RE.match(raw):
        raise FishronError(f"'{raw}' is not a valid task number.")
    if len(raw.lstrip("+-")) > MAX_INDEX_DIGITS:
        raise FishronError(f"'{raw[:12]}...' is not a valid task number.")
    return int(raw)


def parse_todo(args: list[str]) -> Command:
    description = split_segments(args)[""]
    if not description:
        raise FishronError("The description of a todo cannot be empty.")
    return AddCommand(todo(description))


def parse_deadline(args: list[str]) -> Command:
    seg = split_segments(args, (BY,))
    if not seg[""]:
        raise FishronError("The description of a deadline cannot be empty.")
    if not seg.get(BY):
        raise FishronError(
            "Please provide a valid deadline format: deadline <description> /by <when>."
        )
    return AddCommand(deadline(seg[""], seg[BY]))


def parse_event(args: list[str]) -> Command:
    seg = split_segments(args, (FROM, TO))
    if not seg[""]:
        raise FishronError("The description of an event cannot be empty.")
    if list(seg) != ["", FROM, TO] or not seg[FROM] or not seg[TO]:
        raise FishronError(
            "Please provide a valid event format: event <description> /from <start> /to <end>."
        )
    return AddCommand(event(seg[""], seg[FROM], seg[TO]))


def parse_list(args: list[str]) -> Command:
    return ListCommand()


def parse_mark(args: list[str]) -> Command:
    return MarkCommand(_parse_index("mark", args))


def parse_unmark(args: list[str]) -> Command:
    return UnmarkCommand(_parse_index("unmark", args))


def parse_delete(args: list[str]) -> Command:
    return DeleteCommand(_parse_index("delete", args))


def parse_find(args: list[str]) -> Command:
    keyword = split_segments(args)[""]
    if not keyword:
        raise FishronError("Please tell me what to find, e.g. 'find book'.")
    return FindCommand(keyword)


def parse_bye(args: list[str]) -> Command:
    return ExitCommand()


class CommandRegistry:
    """
    Keyword -> argument parser, tried in registration order.

    A keyword matches as a case-insensitive prefix of the line and the rest of
    the line is its argument text, so the first registered prefix wins.
    Keywords registered with exact=True must be the whole line.
    """

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}
        self._help: dict[str, str] = {}
        self._exact: set[str] = set()

    def register(
        self,
        keyword: str,
        parser: CommandParser,
        help_text: str,
        *,
        exact: bool = False,
    ) -> None:
        key = keyword.lower()
        self._parsers[key] = parser
        self._help[key] = help_text
        if exact:
            self._exact.add(key)
        else:
            self._exact.discard(key)

    @property
    def keywords(self) -> list[str]:
        return list(self._parsers)

    def parse(self, line: str) -> Command:
        """
        Parse a line like "deadline return book /by Sunday".
        Raises FishronError for anything that is not a well-formed command.
        """
        text = line.strip()
        for keyword, parser in self._parsers.items():
            if keyword in self._exact:
                if text.lower() == keyword:
                    return parser([])
                continue
            if text and text[: len(keyword)].lower() == keyword:
                return parser(text[len(keyword) :].split())

        logger.debug("Unrecognized command: %r", text)
        raise FishronError("I'm sorry, but I don't know what that means :-(")

    def build_help(self) -> str:
        lines = ["Here is what I understand:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_help(args: list[str]) -> Command:
    return HelpCommand(registry.build_help())


def parse(line: str) -> Command:
    return registry.parse(line)


registry.register("todo", parse_todo, "todo <description>")
registry.register("deadline", parse_deadline, "deadline <description> /by <when>")
registry.register("event", parse_event, "event <description> /from <start> /to <end>")
registry.register("list", parse_list, "list", exact=True)
registry.register("mark", parse_mark, "mark <task number>")
registry.register("unmark", parse_unmark, "unmark <task number>")
registry.register("delete", parse_delete, "delete <task number>")
registry.register("find", parse_find, "find <keyword>")
registry.register("help", parse_help, "help", exact=True)
registry.register("bye", parse_bye, "bye", exact=True)
