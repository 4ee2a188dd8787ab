"""Typer helper utilities."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from chatbot_cli.utils.exit_codes import ERROR_GENERAL
from chatbot_cli.utils.ui.console import get_console


def suggest_commands(attempted: str, known: list[str]) -> list[str]:
    """Known command names that look like ``attempted``, best first."""
    return get_close_matches(attempted, known, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group answering a mistyped subcommand with close matches.

    ``chatbot versoin`` prints "Did you mean this?" followed by ``version``.
    Unknown names with no close match fall through to click's usage error.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            suggestions = suggest_commands(args[0], sorted(self.commands)) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(f'[error]Error:[/error] no command named "{args[0]}".')
            console.print()
            heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
            console.print(f"[yellow]{heading}[/yellow]")
            for name in suggestions:
                console.print(f"    chatbot {name}", highlight=False)
            raise typer.Exit(ERROR_GENERAL) from e
