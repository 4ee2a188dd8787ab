"""User-facing response text.

Pure functions: each maps a command result to the string shown by the REPL,
the full-screen shell, or ``chatbot run``. None of them fail on an empty list.
"""

from __future__ import annotations

from collections.abc import Iterable

from chatbot_cli.models.task import Task
from chatbot_cli.utils.dates import format_display

HELP_LINES = [
    ("list", "show all tasks"),
    ("todo <description>", "add a to-do"),
    ("deadline <description> /by <d/M/yyyy HHmm>", "add a deadline"),
    ("event <description> /from <d/M/yyyy HHmm> /to <d/M/yyyy HHmm>", "add an event"),
    ("mark <n> / unmark <n>", "mark task n as done / not done"),
    ("delete <n>", "remove task n"),
    ("find <word>", "search descriptions (whole words)"),
    ("free /duration <hours>", "next free slot between events"),
    ("bye", "save and quit"),
]


def _numbered(tasks: Iterable[Task]) -> str:
    return "\n".join(f"{i}.{task.encode()}" for i, task in enumerate(tasks, start=1))


def _task_count(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def welcome() -> str:
    return "Hello! I'm ChatBot!\nWhat can I do for you?"


def farewell() -> str:
    return "Bye. Hope to see you again soon!"


def task_listing(tasks: Iterable[Task]) -> str:
    body = _numbered(tasks)
    if not body:
        return "Your task list is empty. Add one with 'todo <description>'."
    return f"Here are the tasks in your list:\n{body}"


def marked_done(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n  {task.encode()}"


def marked_undone(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n  {task.encode()}"


def task_added(task: Task, count: int) -> str:
    return f"Got it. I've added this task:\n  {task.encode()}\n{_task_count(count)}"


def task_deleted(task: Task, count: int) -> str:
    return f"Noted. I've removed this task:\n  {task.encode()}\n{_task_count(count)}"


def search_results(tasks: Iterable[Task]) -> str:
    body = _numbered(tasks)
    if not body:
        return "No tasks in your list match that search."
    return f"Here are the matching tasks in your list:\n{body}"


def free_slot(start, end) -> str:
    """Describe the slot ``[start, end)``."""
    return (
        "Your next available free time slot is from "
        f"{format_display(start)} to {format_display(end)}."
    )


def unknown_command() -> str:
    return "I'm sorry, but I don't know what that means :-(\nType 'help' to see what I can do."


def error_message(error: Exception) -> str:
    return f"OOPS!!! {error}"


def loading_error(error: Exception) -> str:
    return f"LOADING ERROR\n{error}\nStarting with the tasks read before that line."


def help_text() -> str:
    width = max(len(usage) for usage, _ in HELP_LINES)
    lines = ["Here's what I understand:"]
    lines.extend(f"  {usage.ljust(width)}  {meaning}" for usage, meaning in HELP_LINES)
    return "\n".join(lines)
