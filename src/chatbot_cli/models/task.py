"""Task data models.

Tasks form a tagged union over three variants discriminated by ``kind``:
``Todo``, ``Deadline`` and ``Event``. Every variant shares the describe /
completion / encode capability defined on :class:`TaskBase`.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

from chatbot_cli.exceptions import CorruptRecord, ScheduleConflict
from chatbot_cli.utils.dates import format_display, parse_display, parse_input


class TaskBase(BaseModel):
    """Fields and behaviour shared by every task variant.

    Attributes:
        description: What the task is about (non-empty, checked by the parser)
        is_done: Completion flag
    """

    description: str
    is_done: bool = False

    @property
    def status_icon(self) -> str:
        """``X`` when done, a single space otherwise."""
        return "X" if self.is_done else " "

    def mark_done(self) -> None:
        self.is_done = True

    def mark_undone(self) -> None:
        self.is_done = False

    def matches(self, term: str) -> bool:
        """Whole-word, case-insensitive search over the description."""
        term = term.strip()
        if not term:
            return False
        pattern = rf"(?<!\w){re.escape(term)}(?!\w)"
        return re.search(pattern, self.description, re.IGNORECASE) is not None

    def _body(self) -> str:
        return f"[{self.status_icon}] {self.description}"

    def __str__(self) -> str:
        return self.encode()


class Todo(TaskBase):
    """A plain to-do with no date attached."""

    kind: Literal["todo"] = "todo"

    def encode(self) -> str:
        return f"[T]{self._body()}"


class Deadline(TaskBase):
    """A task that must be done by a point in time."""

    kind: Literal["deadline"] = "deadline"
    by: datetime

    @classmethod
    def from_input(cls, description: str, by: str) -> Deadline:
        """Build a deadline from user-entered ``d/M/yyyy HHmm`` text."""
        return cls(description=description, by=parse_input(by))

    def encode(self) -> str:
        return f"[D]{self._body()} (by: {format_display(self.by)})"


class Event(TaskBase):
    """A task occupying the time range ``[start, end]``.

    Attributes:
        start: When the event begins (``/from``)
        end: When the event finishes (``/to``), never before ``start``
    """

    kind: Literal["event"] = "event"
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def _check_range(self) -> Event:
        if self.start > self.end:
            raise ScheduleConflict(
                "An event cannot end before it starts. "
                "Please check the dates and try again."
            )
        return self

    @classmethod
    def from_input(cls, description: str, start: str, end: str) -> Event:
        """Build an event from user-entered ``d/M/yyyy HHmm`` text."""
        return cls(
            description=description,
            start=parse_input(start),
            end=parse_input(end),
        )

    def encode(self) -> str:
        return (
            f"[E]{self._body()} "
            f"(from: {format_display(self.start)} to: {format_display(self.end)})"
        )


Task = Annotated[Union[Todo, Deadline, Event], Field(discriminator="kind")]

_TODO_RE = re.compile(r"^\[T\]\[([ X])\] (.*)$")
_DEADLINE_RE = re.compile(r"^\[D\]\[([ X])\] (.*) \(by: (.+)\)$")
_EVENT_RE = re.compile(r"^\[E\]\[([ X])\] (.*) \(from: (.+?) to: (.+)\)$")


def encode_task(task: Task) -> str:
    """Return the canonical one-line encoding of a task."""
    return task.encode()


def decode_task(line: str) -> Task:
    """Rebuild a task from its canonical encoding.

    Args:
        line: A single line produced by :func:`encode_task`

    Returns:
        An equal task, including its done state.

    Raises:
        CorruptRecord: If the line is not a valid encoding.
    """
    line = line.rstrip("\r\n")
    todo = _TODO_RE.match(line)
    deadline = _DEADLINE_RE.match(line)
    event = _EVENT_RE.match(line)
    try:
        if todo:
            status, description = todo.groups()
            task: Task = Todo(description=description)
        elif deadline:
            status, description, by = deadline.groups()
            task = Deadline(description=description, by=parse_display(by))
        elif event:
            status, description, start, end = event.groups()
            task = Event(
                description=description,
                start=parse_display(start),
                end=parse_display(end),
            )
        else:
            raise CorruptRecord(line)
    except (ValueError, ScheduleConflict) as e:
        raise CorruptRecord(line) from e

    if not task.description:
        raise CorruptRecord(line)
    task.is_done = status == "X"
    return task
