"""Custom exceptions for ChatBot CLI."""


class ChatBotError(Exception):
    """Base exception for all errors a command can report to the user."""


class EmptyArgument(ChatBotError):
    """Raised when a required command argument is blank."""

    def __init__(self, field: str):
        super().__init__(f"{field} cannot be empty.")
        self.field = field


class InvalidIndex(ChatBotError):
    """Raised when a task number is missing or is not an integer."""

    def __init__(self, token: str):
        if token:
            message = f"Task number must be a valid integer, got '{token}'."
        else:
            message = "You need to specify a task number."
        super().__init__(message)
        self.token = token


class IndexOutOfRange(ChatBotError):
    """Raised when a task number does not refer to an existing task."""

    def __init__(self, index: int, count: int):
        if count == 0:
            message = f"Task {index} does not exist. Your list is empty."
        else:
            message = f"Task {index} does not exist. Pick a number from 1 to {count}."
        super().__init__(message)
        self.index = index
        self.count = count


class ScheduleConflict(ChatBotError):
    """Raised when an event would end before it starts."""


class InvalidDuration(ChatBotError):
    """Raised when a free-time request is not a positive number of hours."""


class InvalidDateTime(ChatBotError):
    """Raised when date/time input does not follow d/M/yyyy HHmm."""


class CorruptRecord(ChatBotError):
    """Raised when a persisted line cannot be decoded back into a task.

    Attributes:
        line: The offending line, verbatim.
        line_number: 1-based position in the data file (0 when unknown).
        loaded: Tasks successfully decoded before the offending line.
    """

    def __init__(self, line: str, line_number: int = 0, loaded: list | None = None):
        where = f" (line {line_number})" if line_number else ""
        super().__init__(f"Data file has an unreadable record{where}: {line!r}")
        self.line = line
        self.line_number = line_number
        self.loaded = loaded if loaded is not None else []


class UnknownCommand(ChatBotError):
    """Raised when an input line matches no known command."""

    def __init__(self, line: str):
        super().__init__("I'm sorry, but I don't know what that means :-(")
        self.line = line
