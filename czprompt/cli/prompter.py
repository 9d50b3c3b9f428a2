"""Terminal prompter backed by typer.prompt.

Renders list questions as numbered menus, expand questions as key
prompts and input questions as plain prompts.
"""

from typing import Any

import typer

from czprompt.exceptions import ConfigError
from czprompt.questions import Answers, Question, QuestionKind, Separator


class TyperPrompter:
    """Asks questions on the terminal."""

    def ask(self, question: Question, choices: list, answers: Answers) -> Any:
        if question.kind == QuestionKind.LIST:
            return self._ask_list(question, choices)
        if question.kind == QuestionKind.EXPAND:
            return self._ask_expand(question, choices)
        return self._ask_input(question)

    def reject(self, question: Question, message: str) -> None:
        typer.echo(f">> {message}", err=True)

    def _ask_input(self, question: Question) -> str:
        default = question.default or ""
        return typer.prompt(
            # typer.prompt appends its own colon
            question.message.strip().rstrip(":"),
            default=default,
            show_default=bool(default),
        )

    def _ask_list(self, question: Question, choices: list) -> Any:
        selectable = []
        typer.echo(question.message.strip())
        for item in choices:
            if isinstance(item, Separator):
                typer.echo(f"   {item.line}")
                continue
            selectable.append(item)
            typer.echo(f"  {len(selectable)}) {item.name}")

        if not selectable:
            raise ConfigError(f"Question '{question.name}' has no choices")

        while True:
            index = typer.prompt("Choice", type=int, default=1)
            if 1 <= index <= len(selectable):
                return selectable[index - 1].value
            typer.echo(f">> Enter a number between 1 and {len(selectable)}", err=True)

    def _ask_expand(self, question: Question, choices: list) -> Any:
        by_key = {item.key.lower(): item for item in choices}
        default_key = choices[question.default or 0].key
        for item in choices:
            typer.echo(f"  {item.key}) {item.name}")

        while True:
            key = typer.prompt(
                f"{question.message.strip()} [{'/'.join(by_key)}]",
                default=default_key,
            )
            item = by_key.get(key.strip().lower())
            if item is not None:
                return item.value
            typer.echo(f">> Choose one of: {', '.join(by_key)}", err=True)
