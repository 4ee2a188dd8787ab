"""Ordered task collection owned by a session."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from chatbot_cli.exceptions import IndexOutOfRange
from chatbot_cli.models.task import Event, Task


class TaskList:
    """An ordered, mutable sequence of tasks.

    Insertion order is display and storage order. Only :meth:`sort_by`
    produces a different order, and it returns a new list. Tasks are
    referenced, never copied, by derived lists.
    """

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._tasks: list[Task] = list(tasks) if tasks is not None else []

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def delete(self, task: Task) -> None:
        """Remove ``task`` by identity.

        Raises:
            ValueError: If this exact task object is not in the list.
        """
        for i, candidate in enumerate(self._tasks):
            if candidate is task:
                del self._tasks[i]
                return
        raise ValueError("task is not in this list")

    def get(self, index: int) -> Task:
        """Return the task at a 0-based ``index``."""
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRange(index + 1, len(self._tasks))
        return self._tasks[index]

    def count(self) -> int:
        return len(self._tasks)

    def filter(self, predicate: Callable[[Task], bool]) -> TaskList:
        return TaskList(task for task in self._tasks if predicate(task))

    def sort_by(self, key: Callable[[Task], Any]) -> TaskList:
        return TaskList(sorted(self._tasks, key=key))

    def events(self) -> list[Event]:
        return [task for task in self._tasks if isinstance(task, Event)]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
