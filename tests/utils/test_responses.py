"""Tests for user-facing response text."""

from datetime import datetime

from chatbot_cli.exceptions import CorruptRecord, EmptyArgument
from chatbot_cli.models.task import Todo
from chatbot_cli.utils.ui import responses


def test_listing(sample_tasks):
    assert responses.task_listing(sample_tasks) == (
        "Here are the tasks in your list:\n"
        "1.[T][ ] read book\n"
        "2.[D][X] report (by: Dec 2 2025, 18:00)\n"
        "3.[E][ ] project meeting (from: Dec 2 2025, 16:00 to: Dec 2 2025, 18:00)"
    )


def test_empty_listing():
    assert "empty" in responses.task_listing([])


def test_task_count_grammar():
    task = Todo(description="x")
    assert responses.task_added(task, 1).endswith("Now you have 1 task in the list.")
    assert responses.task_deleted(task, 0).endswith("Now you have 0 tasks in the list.")


def test_free_slot():
    text = responses.free_slot(datetime(2025, 12, 1, 12, 0), datetime(2025, 12, 1, 13, 30))
    assert text == (
        "Your next available free time slot is from "
        "Dec 1 2025, 12:00 to Dec 1 2025, 13:30."
    )


def test_error_message():
    assert responses.error_message(EmptyArgument("search term")) == (
        "OOPS!!! search term cannot be empty."
    )


def test_loading_error_mentions_line():
    message = responses.loading_error(CorruptRecord("[Q] x", 4))
    assert message.startswith("LOADING ERROR\n")
    assert "(line 4)" in message


def test_help_lists_every_command():
    text = responses.help_text()
    for word in ("list", "todo", "deadline", "event", "mark", "delete", "find", "free", "bye"):
        assert word in text
