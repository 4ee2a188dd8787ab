"""Console output helpers shared by the CLI commands and the REPL."""

from rich.markup import escape
from rich.text import Text

from chatbot_cli.utils.ui.console import get_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[error]Error:[/error] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[success]✓[/success] {escape(message)}")


def format_response(text: str, is_error: bool = False, color: bool = True) -> None:
    """Print a bot response verbatim, styled by outcome.

    Task encodings contain brackets, so the text is printed as a ``Text``
    object rather than parsed as markup.
    """
    console = get_console(highlight=False, color=color)
    console.print(Text(text, style="error" if is_error else "bot"))
