"""Line grammar for the task tracker.

Every rule is a stateless matcher: it receives the raw line and returns the
captured groups, or ``None`` when the line does not have that shape. The
first matching rule decides the command; arguments are validated only after
the command has been chosen.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from chatbot_cli.exceptions import EmptyArgument, IndexOutOfRange, InvalidIndex
from chatbot_cli.models.task_list import TaskList


class CommandType(str, Enum):
    """Kinds of command the tracker understands."""

    EXIT = "exit"
    LIST = "list"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    ADD_TODO = "add-todo"
    ADD_DEADLINE = "add-deadline"
    ADD_EVENT = "add-event"
    SEARCH = "search"
    FIND_FREE_TIME = "find-free-time"
    UNKNOWN = "unknown"


# Commands that change the task list and must be persisted afterwards.
MUTATING_COMMANDS = frozenset(
    {
        CommandType.MARK,
        CommandType.UNMARK,
        CommandType.DELETE,
        CommandType.ADD_TODO,
        CommandType.ADD_DEADLINE,
        CommandType.ADD_EVENT,
    }
)


@dataclass
class Command:
    """A parsed input line: its type plus validated string arguments."""

    type: CommandType
    args: list[str] = field(default_factory=list)

    @property
    def is_mutating(self) -> bool:
        return self.type in MUTATING_COMMANDS


Groups = tuple[str, ...]
Matcher = Callable[[str], "Groups | None"]

_INDEXED_RE = {
    CommandType.MARK: re.compile(r"^mark(?:\s+(.*))?$"),
    CommandType.UNMARK: re.compile(r"^unmark(?:\s+(.*))?$"),
    CommandType.DELETE: re.compile(r"^delete(?:\s+(.*))?$"),
}
_TODO_RE = re.compile(r"^todo(?:\s+(.*))?$")
_DEADLINE_RE = re.compile(r"^deadline(?:\s+(.*?))?\s*/by(?:\s+(.*))?$")
_EVENT_RE = re.compile(
    r"^event(?:\s+(.*?))?\s*/from(?:\s+(.*?))?\s*/to(?:\s+(.*))?$"
)
_FIND_RE = re.compile(r"^find(?:\s+(.*))?$")
_FREE_RE = re.compile(r"^free\s+/duration(?:\s+(.*))?$")
# ASCII digits with an optional minus sign.
_INDEX_RE = re.compile(r"-?[0-9]+")


def _groups(pattern: re.Pattern[str], line: str) -> Groups | None:
    match = pattern.match(line)
    if match is None:
        return None
    return tuple((group or "").strip() for group in match.groups())


def _exact(word: str) -> Matcher:
    def matcher(line: str) -> Groups | None:
        return () if line == word else None

    return matcher


def _pattern(pattern: re.Pattern[str]) -> Matcher:
    def matcher(line: str) -> Groups | None:
        return _groups(pattern, line)

    return matcher


# Order is precedence: the first rule that matches wins.
RULES: list[tuple[CommandType, Matcher]] = [
    (CommandType.EXIT, _exact("bye")),
    (CommandType.LIST, _exact("list")),
    (CommandType.MARK, _pattern(_INDEXED_RE[CommandType.MARK])),
    (CommandType.UNMARK, _pattern(_INDEXED_RE[CommandType.UNMARK])),
    (CommandType.DELETE, _pattern(_INDEXED_RE[CommandType.DELETE])),
    (CommandType.ADD_TODO, _pattern(_TODO_RE)),
    (CommandType.ADD_DEADLINE, _pattern(_DEADLINE_RE)),
    (CommandType.ADD_EVENT, _pattern(_EVENT_RE)),
    (CommandType.SEARCH, _pattern(_FIND_RE)),
    (CommandType.FIND_FREE_TIME, _pattern(_FREE_RE)),
]

# Field names used in EmptyArgument messages, per captured group.
_FIELDS: dict[CommandType, tuple[str, ...]] = {
    CommandType.ADD_TODO: ("todo description",),
    CommandType.ADD_DEADLINE: ("deadline description", "deadline /by date"),
    CommandType.ADD_EVENT: (
        "event description",
        "event /from date",
        "event /to date",
    ),
    CommandType.SEARCH: ("search term",),
    CommandType.FIND_FREE_TIME: ("free time /duration",),
}


def match_command(line: str) -> tuple[CommandType, Groups]:
    """Find the first rule matching ``line``.

    Returns:
        The command type and its raw (trimmed, unvalidated) groups.
    """
    for command_type, matcher in RULES:
        groups = matcher(line)
        if groups is not None:
            return command_type, groups
    return CommandType.UNKNOWN, ()


def _validate_index(token: str) -> str:
    if _INDEX_RE.fullmatch(token) is None:
        raise InvalidIndex(token)
    return token


def parse_command(line: str) -> Command:
    """Turn one raw input line into a validated :class:`Command`.

    Args:
        line: Raw text as typed by the user

    Returns:
        The command with its arguments.

    Raises:
        EmptyArgument: A description, date, search term or duration is blank.
        InvalidIndex: A mark/unmark/delete task number is not an integer.
    """
    line = line.strip()
    command_type, groups = match_command(line)

    if command_type in _INDEXED_RE:
        return Command(command_type, [_validate_index(groups[0])])

    names = _FIELDS.get(command_type, ())
    for name, value in zip(names, groups):
        if not value:
            raise EmptyArgument(name)
    return Command(command_type, list(groups))


def resolve_index(command: Command, tasks: TaskList) -> int:
    """Convert a command's 1-based task number into a 0-based list index.

    Raises:
        IndexOutOfRange: If the number is outside ``[1, len(tasks)]``.
    """
    number = int(command.args[0])
    if not 1 <= number <= len(tasks):
        raise IndexOutOfRange(number, len(tasks))
    return number - 1
