"""CLI entry point for czprompt.

Combines all commands into a single typer application.
"""

import logging

import typer

from czprompt.cli.ask import ask_command
from czprompt.cli.questions import questions_command
from czprompt.logging import configure_logging

app = typer.Typer(
    name="czprompt",
    help="czprompt: conditional commit message questions",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug events to stderr",
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(level=logging.DEBUG if verbose else None)


app.command("questions")(questions_command)
app.command("ask")(ask_command)


__all__ = [
    "app",
    "ask_command",
    "questions_command",
]
