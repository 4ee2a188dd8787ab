"""Command dispatch for one tracker session.

A :class:`SessionContext` is the explicit handle every handler receives: the
task list, the store it is persisted to, and the clock used by the free-time
search. :func:`execute` turns one input line into a :class:`Response`,
converting every :class:`ChatBotError` into an error response so no command
can end the session by failing.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from chatbot_cli.adapters.file_store import FileStore
from chatbot_cli.commands.parser import Command, CommandType, parse_command, resolve_index
from chatbot_cli.exceptions import ChatBotError, CorruptRecord, UnknownCommand
from chatbot_cli.models.task import Deadline, Event, Todo
from chatbot_cli.models.task_list import TaskList
from chatbot_cli.services.scheduler import find_free_slot, parse_duration
from chatbot_cli.utils.dates import now_minute
from chatbot_cli.utils.ui import responses

logger = logging.getLogger(__name__)


@dataclass
class Response:
    """What a presenter should show after a line has been handled."""

    text: str
    is_error: bool = False
    is_exit: bool = False


@dataclass
class SessionContext:
    """Mutable state of a running session, passed explicitly to handlers."""

    tasks: TaskList = field(default_factory=TaskList)
    store: FileStore | None = None
    clock: Callable[[], datetime] = now_minute

    def save(self) -> bool:
        """Persist the task list; a failed save is logged and reported as ``False``."""
        if self.store is None:
            return True
        return self.store.save(self.tasks)


Handler = Callable[[SessionContext, Command], str]


def _exit(ctx: SessionContext, command: Command) -> str:
    return responses.farewell()


def _list(ctx: SessionContext, command: Command) -> str:
    return responses.task_listing(ctx.tasks)


def _mark(ctx: SessionContext, command: Command) -> str:
    task = ctx.tasks.get(resolve_index(command, ctx.tasks))
    task.mark_done()
    return responses.marked_done(task)


def _unmark(ctx: SessionContext, command: Command) -> str:
    task = ctx.tasks.get(resolve_index(command, ctx.tasks))
    task.mark_undone()
    return responses.marked_undone(task)


def _delete(ctx: SessionContext, command: Command) -> str:
    task = ctx.tasks.get(resolve_index(command, ctx.tasks))
    ctx.tasks.delete(task)
    return responses.task_deleted(task, len(ctx.tasks))


def _add_todo(ctx: SessionContext, command: Command) -> str:
    (description,) = command.args
    task = Todo(description=description)
    ctx.tasks.add(task)
    return responses.task_added(task, len(ctx.tasks))


def _add_deadline(ctx: SessionContext, command: Command) -> str:
    description, by = command.args
    task = Deadline.from_input(description, by)
    ctx.tasks.add(task)
    return responses.task_added(task, len(ctx.tasks))


def _add_event(ctx: SessionContext, command: Command) -> str:
    description, start, end = command.args
    task = Event.from_input(description, start, end)
    ctx.tasks.add(task)
    return responses.task_added(task, len(ctx.tasks))


def _search(ctx: SessionContext, command: Command) -> str:
    (term,) = command.args
    return responses.search_results(ctx.tasks.filter(lambda task: task.matches(term)))


def _find_free_time(ctx: SessionContext, command: Command) -> str:
    hours = parse_duration(command.args[0])
    slot = find_free_slot(ctx.tasks, hours, now=ctx.clock())
    return responses.free_slot(slot.start, slot.end)


HANDLERS: dict[CommandType, Handler] = {
    CommandType.EXIT: _exit,
    CommandType.LIST: _list,
    CommandType.MARK: _mark,
    CommandType.UNMARK: _unmark,
    CommandType.DELETE: _delete,
    CommandType.ADD_TODO: _add_todo,
    CommandType.ADD_DEADLINE: _add_deadline,
    CommandType.ADD_EVENT: _add_event,
    CommandType.SEARCH: _search,
    CommandType.FIND_FREE_TIME: _find_free_time,
}


def execute(ctx: SessionContext, line: str) -> Response:
    """Parse, run and format one input line.

    Mutating commands and ``bye`` save the task list before returning.
    """
    start = time.monotonic()
    try:
        command = parse_command(line)
        handler = HANDLERS.get(command.type)
        if handler is None:
            raise UnknownCommand(line)
        text = handler(ctx, command)
    except UnknownCommand:
        logger.info("unknown command: %r", line)
        return Response(responses.unknown_command(), is_error=True)
    except ChatBotError as e:
        logger.warning("command failed: %r - %s", line, e)
        return Response(responses.error_message(e), is_error=True)

    if command.is_mutating or command.type is CommandType.EXIT:
        ctx.save()
    logger.info(
        "command completed: %s (%.3fs)", command.type.value, time.monotonic() - start
    )
    return Response(text, is_exit=command.type is CommandType.EXIT)


def respond(ctx: SessionContext, line: str) -> Response:
    """Presenter entry point: ``help`` is answered here, the rest is executed."""
    if line.strip() == "help":
        return Response(responses.help_text())
    return execute(ctx, line)


def start_session(
    store: FileStore,
    clock: Callable[[], datetime] = now_minute,
) -> tuple[SessionContext, str | None]:
    """Load the store into a new session.

    Returns:
        The session and, when the data file could not be read completely, a
        one-time message for the user. The session then holds the tasks read
        before the first bad line.
    """
    try:
        tasks = store.load()
    except CorruptRecord as e:
        return SessionContext(TaskList(e.loaded), store, clock), responses.loading_error(e)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("could not read %s: %s", store.path, e)
        return SessionContext(TaskList(), store, clock), responses.loading_error(e)
    logger.info("session started with %d task(s) from %s", len(tasks), store.path)
    return SessionContext(TaskList(tasks), store, clock), None
