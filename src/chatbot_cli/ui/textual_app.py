"""Textual full-screen shell around the command dispatcher.

A scrolling dialog log above a single input line. Each submitted line goes
through the same dispatcher as the REPL; error responses are shown in red.
"""

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Input, RichLog, Static

from chatbot_cli.services.session import SessionContext, respond
from chatbot_cli.utils.ui import responses


class ChatBotApp(App):
    """Dialog-style task tracker."""

    TITLE = "ChatBot"

    CSS = """
    Screen {
        background: $background;
        padding: 0;
    }

    #title {
        width: 100%;
        height: 1;
        padding: 0 1;
        background: $primary;
        color: $text;
    }

    #dialog {
        height: 1fr;
        padding: 0 1;
        border: none;
    }

    #user-input {
        width: 100%;
        dock: bottom;
    }
    """

    BINDINGS = [("escape", "quit", "Quit")]

    def __init__(self, ctx: SessionContext, startup_message: str | None = None):
        super().__init__()
        self.ctx = ctx
        self.startup_message = startup_message
        # (speaker, text, is_error) for every line shown in the dialog
        self.transcript: list[tuple[str, str, bool]] = []

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        with Vertical():
            yield Static(" ChatBot  [dim]type help for commands[/dim]", id="title")
            yield RichLog(id="dialog", wrap=True, markup=False, highlight=False)
            yield Input(placeholder="e.g. todo read book", id="user-input")

    def on_mount(self) -> None:
        """Greet the user and focus the input."""
        self._show("bot", responses.welcome())
        if self.startup_message:
            self._show("bot", self.startup_message, is_error=True)
        self.query_one("#user-input", Input).focus()

    def on_unmount(self) -> None:
        self.ctx.save()

    def _show(self, speaker: str, text: str, is_error: bool = False) -> None:
        self.transcript.append((speaker, text, is_error))
        dialog = self.query_one("#dialog", RichLog)
        if speaker == "user":
            dialog.write(Text(f"> {text}", style="bold"))
        else:
            dialog.write(Text(text, style="bold red" if is_error else "cyan"))
        dialog.write(Text(""))

    @on(Input.Submitted)
    def handle_submit(self, event: Input.Submitted) -> None:
        """Run the submitted line and append both sides to the dialog."""
        line = event.value.strip()
        event.input.value = ""
        if not line:
            return

        self._show("user", line)
        response = respond(self.ctx, line)
        self._show("bot", response.text, is_error=response.is_error)
        if response.is_exit:
            self.exit()
