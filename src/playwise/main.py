"""
Interactive command loop for PlayWise.
"""

from loguru import logger

from playwise import router
from playwise.context import AppContext
from playwise.helpers import console_for
from playwise.utils import parsers


def run_command(ctx: AppContext, user_input: str) -> tuple[AppContext, bool]:
    """Parse one line of input and dispatch it through the router."""
    command, args = parsers.parse_command(user_input)
    logger.debug(f"Command: {command} {args}")
    return router.handle_command(ctx, command, args)


def interactive_mode(ctx: AppContext) -> AppContext:
    """
    Read commands from the terminal until quit, exit or EOF.

    The caller owns the session and closes it.

    Args:
        ctx: Initial application context

    Returns:
        The final application context
    """
    console = console_for(ctx)

    console.print("[bold green]Welcome to PlayWise![/bold green]")
    console.print("Type 'help' for available commands, or 'quit' to exit.")
    console.print()

    should_continue = True
    while should_continue:
        try:
            user_input = console.input("[bold cyan]playwise>[/bold cyan] ").strip()
            ctx, should_continue = run_command(ctx, user_input)

        except KeyboardInterrupt:
            console.print("\n[yellow]Use 'quit' or 'exit' to leave gracefully.[/yellow]")
        except EOFError:
            console.print("\n[green]Goodbye![/green]")
            break

    return ctx
