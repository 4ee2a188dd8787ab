"""Main entry point for ChatBot CLI."""

from pathlib import Path
from typing import Optional

import typer

from chatbot_cli import __version__
from chatbot_cli.adapters.file_store import FileStore
from chatbot_cli.commands import config
from chatbot_cli.commands.decorators import command_wrapper
from chatbot_cli.models.config_models import AppConfig
from chatbot_cli.services.config_service import get_config_service
from chatbot_cli.services.session import SessionContext, respond, start_session
from chatbot_cli.utils.exit_codes import ERROR_INVALID_ARGS, SUCCESS, get_exit_code_name
from chatbot_cli.utils.logger import configure_level, get_logger
from chatbot_cli.utils.typer_helpers import SuggestingGroup
from chatbot_cli.utils.ui.console import get_console
from chatbot_cli.utils.ui.formatters import format_response

app = typer.Typer(
    name="chatbot",
    cls=SuggestingGroup,
    help="A line-oriented personal task tracker: to-dos, deadlines and events",
)

console = get_console()

app.add_typer(config.app, name="config", help="Configuration management")


def _open_session(
    data_file: Path | None,
) -> tuple[SessionContext, str | None, AppConfig]:
    """Load configuration, set up logging and read the task file."""
    settings = get_config_service().config
    logger = configure_level(settings.log_level)
    path = data_file or Path(settings.data_file)
    logger.info("opening task file %s", path)
    ctx, startup_message = start_session(FileStore(path))
    return ctx, startup_message, settings


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    data_file: Optional[Path] = typer.Option(
        None, "--data-file", "-f", help="Task file to use instead of the configured one"
    ),
) -> None:
    """Start the interactive chat when no command is given."""
    ctx.obj = {"data_file": data_file}
    if ctx.invoked_subcommand is None:
        chat(ctx)


@app.command()
@command_wrapper
def chat(ctx: typer.Context) -> None:
    """Chat with the tracker in this terminal (default)."""
    from chatbot_cli.ui.interactive_prompt import build_session, run_repl

    session_ctx, startup_message, settings = _open_session(ctx.obj["data_file"])
    run_repl(
        session_ctx,
        session=build_session(settings.history_file, settings.prompt),
        startup_message=startup_message,
        color=settings.color,
    )


@app.command()
@command_wrapper
def gui(ctx: typer.Context) -> None:
    """Open the full-screen dialog shell."""
    from chatbot_cli.ui.textual_app import ChatBotApp

    session_ctx, startup_message, _ = _open_session(ctx.obj["data_file"])
    ChatBotApp(session_ctx, startup_message=startup_message).run()


@app.command()
@command_wrapper
def run(
    ctx: typer.Context,
    line: str = typer.Argument(..., help='One command line, e.g. "todo buy milk"'),
) -> None:
    """Execute a single command line and print the response.

    Exits with 2 when the command is rejected (bad index, empty argument, ...).
    """
    session_ctx, startup_message, settings = _open_session(ctx.obj["data_file"])
    if startup_message:
        format_response(startup_message, is_error=True, color=settings.color)

    response = respond(session_ctx, line)
    format_response(response.text, is_error=response.is_error, color=settings.color)

    code = ERROR_INVALID_ARGS if response.is_error else SUCCESS
    get_logger().info(
        "run %r finished with %s", line, get_exit_code_name(code)
    )
    if code != SUCCESS:
        raise typer.Exit(code)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]ChatBot CLI[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
