"""CLI command that runs the interactive question session."""

import json
from pathlib import Path
from typing import Optional

import typer

from czprompt.cli.prompter import TyperPrompter
from czprompt.cli.utils import format_answers, load_raw_config
from czprompt.exceptions import CzPromptError
from czprompt.questions import QuestionName, build, run_session


def ask_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the configuration file (defaults to .cz-config.yaml in the repo root)",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Print the collected answers as JSON",
    ),
) -> None:
    """Ask the commit questions and print the collected answers.

    Nothing is committed. Exits with code 1 when the commit is aborted at
    the confirmation step.
    """
    try:
        questions = build(load_raw_config(config_path), formatter=format_answers)
        answers = run_session(questions, TyperPrompter(), emit=typer.echo)
    except CzPromptError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if answers.get(QuestionName.CONFIRM_COMMIT.value) == "no":
        typer.echo("Commit aborted.", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(answers.to_dict(), indent=2))
    else:
        typer.echo(format_answers(answers))
