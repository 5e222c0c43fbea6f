"""
Shared Rich console, theme and log handler for the Trafexia CLI.
"""
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

custom_theme = Theme({
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
    "highlight": "bold blue",
    "muted": "dim",
    "url": "underline blue",
    "category": "magenta",
    "count": "bold",
    "table.header": "bold blue",
})

console = Console(theme=custom_theme, highlight=False)

# Logs go to stderr so piped URL lists stay clean
log_console = Console(theme=custom_theme, stderr=True)


def configure_logging(level: int = logging.WARNING) -> None:
    """Route library logging through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=log_console, show_path=False, markup=False)],
        force=True,
    )
