"""Centralized Rich Console management.

A single Console instance is shared by the output helpers and the command
renderers so color settings apply everywhere.
"""

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich Console instance.

    Returns:
        Console: The global Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def configure_console(use_colors: bool = True) -> Console:
    """Replace the global Console, e.g. to disable colors from config."""
    global _console
    _console = Console(no_color=not use_colors, highlight=use_colors)
    return _console


def safe_print(message: str, style: str | None = None) -> None:
    """Print using Rich Console with optional styling.

    Markup is disabled so track titles like "[intro]" print verbatim.

    Args:
        message: The message to print
        style: Optional Rich style string (e.g., "bold red", "green")
    """
    console = get_console()
    if style:
        console.print(message, style=style, markup=False)
    else:
        console.print(message, markup=False)
