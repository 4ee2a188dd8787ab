"""Free-time finding over the event tasks of a list.

Two related algorithms:

- :func:`merge_overlapping` collapses events, sorted by start, into the
  minimal set of disjoint ranges covering them.
- :func:`find_free_slot` runs a first-fit scan for the earliest gap of the
  requested length after ``now``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation

from chatbot_cli.exceptions import InvalidDuration
from chatbot_cli.models.task import Event
from chatbot_cli.models.task_list import TaskList
from chatbot_cli.utils.dates import now_minute

MIN_SLOT = timedelta(minutes=1)


@dataclass(frozen=True)
class TimeRange:
    """A closed-open time range ``[start, end)``."""

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


def merge_overlapping(events: Iterable[Event]) -> list[TimeRange]:
    """Merge events into disjoint ranges.

    Args:
        events: Events sorted ascending by start time

    Returns:
        Disjoint ranges in ascending order; empty when there are no events.
    """
    merged: list[TimeRange] = []
    current: TimeRange | None = None
    for event in events:
        if current is None:
            current = TimeRange(event.start, event.end)
        elif event.start <= current.end:
            current = TimeRange(current.start, max(current.end, event.end))
        else:
            merged.append(current)
            current = TimeRange(event.start, event.end)
    if current is not None:
        merged.append(current)
    return merged


def upcoming_events(tasks: TaskList, now: datetime) -> list[Event]:
    """Events starting strictly after ``now``, sorted by start time.

    Events already under way at ``now`` are not included.
    """
    future = tasks.filter(lambda task: isinstance(task, Event) and task.start > now)
    return future.sort_by(lambda event: event.start).events()


def find_free_slot(
    tasks: TaskList,
    hours: float | Decimal,
    now: datetime | None = None,
) -> TimeRange:
    """Find the earliest free slot of ``hours`` length starting at or after ``now``.

    Args:
        tasks: The task list; only its events are considered
        hours: Requested length in hours, must be positive
        now: Reference instant, defaults to the current minute

    Returns:
        The slot ``[start, start + hours)``; ``start`` is never before ``now``.

    Raises:
        InvalidDuration: If ``hours`` is shorter than one minute or too long.
    """
    if not hours > 0:
        raise InvalidDuration(f"Duration must be a positive number of hours, got {hours}.")

    now = now if now is not None else now_minute()
    try:
        length = timedelta(hours=float(hours))
    except OverflowError:
        raise InvalidDuration(f"A duration of {hours} hours is too long.") from None
    # Times have minute precision.
    if length < MIN_SLOT:
        raise InvalidDuration(f"Duration must be at least one minute, got {hours} hours.")

    try:
        candidate = now
        for busy in merge_overlapping(upcoming_events(tasks, now)):
            if busy.start - length >= candidate:
                break
            candidate = busy.end
        return TimeRange(candidate, candidate + length)
    except OverflowError:
        raise InvalidDuration(f"A duration of {hours} hours is too long.") from None


def parse_duration(text: str) -> Decimal:
    """Parse a ``/duration`` argument as a positive number of hours.

    Raises:
        InvalidDuration: If the text is not a positive finite number.
    """
    try:
        hours = Decimal(text.strip())
    except InvalidOperation:
        raise InvalidDuration(
            f"'{text}' is not a valid duration. Give a number of hours, e.g. 2."
        ) from None
    if not hours.is_finite() or hours <= 0:
        raise InvalidDuration(
            f"Duration must be a positive number of hours, got '{text}'."
        )
    return hours
