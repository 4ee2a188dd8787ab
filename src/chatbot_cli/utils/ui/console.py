"""Console utilities for ChatBot CLI."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

CHATBOT_THEME = Theme(
    {
        "bot": "cyan",
        "error": "bold red",
        "success": "green",
    }
)


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, color: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight, no_color=not color, theme=CHATBOT_THEME)
