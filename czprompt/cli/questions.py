"""CLI command that lists the configured questions."""

import json
from pathlib import Path
from typing import Optional

import typer

from czprompt.cli.utils import load_raw_config
from czprompt.exceptions import CzPromptError
from czprompt.questions import build


def questions_command(
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
        help="Print the questions as JSON",
    ),
) -> None:
    """Show the questions that would be asked, in order."""
    try:
        questions = build(load_raw_config(config_path))
    except CzPromptError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        data = [
            {
                "name": q.name,
                "kind": q.kind.value,
                "message": q.message.strip(),
                "conditional": q.when is not None,
                "default": q.default,
            }
            for q in questions
        ]
        typer.echo(json.dumps(data, indent=2))
        return

    for i, q in enumerate(questions, 1):
        marker = " (conditional)" if q.when is not None else ""
        typer.echo(f"{i}. {q.name} [{q.kind.value}]{marker}")
        typer.echo(f"   {q.message.strip()}")
