"""Interactive REPL with command completion and syntax highlighting."""

import re
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.lexers import Lexer
from prompt_toolkit.styles import Style

from chatbot_cli.services.session import SessionContext, respond
from chatbot_cli.utils.ui import responses
from chatbot_cli.utils.ui.formatters import format_response

COMMAND_WORDS = [
    "bye",
    "list",
    "mark",
    "unmark",
    "delete",
    "todo",
    "deadline",
    "event",
    "find",
    "free",
    "help",
]

# Flags that may follow each command word, in the order they are typed.
COMMAND_FLAGS = {
    "deadline": ["/by"],
    "event": ["/from", "/to"],
    "free": ["/duration"],
}

STYLE = Style.from_dict(
    {
        "command": "bold #00aaff",
        "flag": "#ff8800",
        "date": "#00aa00",
        "number": "#aa00ff",
        "bottom-toolbar": "#888888",
    }
)

_DATE_RE = re.compile(r"\b\d{1,2}/\d{1,2}/\d{4}(?:\s+\d{4})?\b")
_FLAG_RE = re.compile(r"(?<!\S)/(?:by|from|to|duration)\b")
_NUMBER_RE = re.compile(r"(?<=\s)\d+\b")


class CommandLexer(Lexer):
    """Highlight the command word, its flags, dates and task numbers."""

    def lex_document(self, document: Document):
        """Lex the document and return formatted text."""

        def get_line(lineno):
            if lineno >= len(document.lines):
                return []

            line_text = document.lines[lineno]
            ranges = []

            first = re.match(r"\s*(\S+)", line_text)
            if first and first.group(1) in COMMAND_WORDS:
                ranges.append((first.start(1), first.end(1), "class:command"))

            for pattern, style in (
                (_FLAG_RE, "class:flag"),
                (_DATE_RE, "class:date"),
                (_NUMBER_RE, "class:number"),
            ):
                for match in pattern.finditer(line_text):
                    overlaps = any(
                        match.start() < end and start < match.end()
                        for start, end, _ in ranges
                    )
                    if not overlaps:
                        ranges.append((match.start(), match.end(), style))

            ranges.sort(key=lambda r: r[0])

            formatted = []
            pos = 0
            for start, end, style in ranges:
                if start > pos:
                    formatted.append(("", line_text[pos:start]))
                formatted.append((style, line_text[start:end]))
                pos = end
            if pos < len(line_text):
                formatted.append(("", line_text[pos:]))
            return formatted

        return get_line


class CommandCompleter(Completer):
    """Complete command words at the start of a line and flags after them."""

    def get_completions(self, document, complete_event):
        """Get completions for current cursor position."""
        text = document.text_before_cursor
        words = text.split()

        # Still typing the first word
        if not words or (len(words) == 1 and not text.endswith(" ")):
            prefix = words[0] if words else ""
            for word in COMMAND_WORDS:
                if word.startswith(prefix):
                    yield Completion(word, start_position=-len(prefix))
            return

        flags = COMMAND_FLAGS.get(words[0], [])
        current = "" if text.endswith(" ") else words[-1]
        if current and not current.startswith("/"):
            return
        used = set(words)
        for flag in flags:
            if flag in used:
                continue
            if flag.startswith(current):
                yield Completion(flag, start_position=-len(current))
            # Flags are positional: only offer the next one.
            break


def build_session(
    history_file: str | Path | None = None, prompt_text: str = "❯ "
) -> PromptSession:
    """Create the prompt session used by :func:`run_repl`."""
    history: History
    if history_file:
        path = Path(history_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        history = FileHistory(str(path))
    else:
        history = InMemoryHistory()

    def bottom_toolbar():
        return [
            ("class:bottom-toolbar", " Type "),
            ("bold", "help"),
            ("class:bottom-toolbar", " for commands, "),
            ("bold", "bye"),
            ("class:bottom-toolbar", " to quit."),
        ]

    return PromptSession(
        message=prompt_text,
        history=history,
        lexer=CommandLexer(),
        completer=CommandCompleter(),
        style=STYLE,
        complete_while_typing=True,
        bottom_toolbar=bottom_toolbar,
    )


def run_repl(
    ctx: SessionContext,
    session: PromptSession | None = None,
    startup_message: str | None = None,
    color: bool = True,
) -> None:
    """Read lines until ``bye``, end of input or Ctrl+C.

    Every line is executed against ``ctx``; responses are printed with rich.
    """
    session = session or build_session()

    format_response(responses.welcome(), color=color)
    if startup_message:
        format_response(startup_message, is_error=True, color=color)

    while True:
        try:
            line = session.prompt()
        except (EOFError, KeyboardInterrupt):
            ctx.save()
            format_response(responses.farewell(), color=color)
            return

        if not line.strip():
            continue

        response = respond(ctx, line)
        format_response(response.text, is_error=response.is_error, color=color)
        if response.is_exit:
            return
