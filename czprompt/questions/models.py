"""Data models for the commit question graph.

Contains:
- Question: One step of the interactive sequence with its behaviour attached
- Answers: The answers collected so far in one session
- Separator: Non-selectable divider inside a choice list
- ChoiceFactory / DefaultChoiceFactory: Constructors for separator and choice items
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, Union

from czprompt.config.models import Choice
from czprompt.exceptions import AnswerAlreadySetError, UnansweredQuestionError
from czprompt.questions.constants import QuestionKind


class Answers(Mapping):
    """Answers collected in one session, keyed by question name.

    Reading an answer that was not collected raises UnansweredQuestionError.
    A recorded answer cannot be replaced. Presence predicates may assign an
    answer for a question they decide not to present (assign_implicit).

    The session marks the names of upcoming questions as pending; lookup()
    then tells a question that was skipped (None) apart from one that has
    not been reached yet (error).
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._values: dict[str, Any] = dict(initial or {})
        self._implicit: set[str] = set()
        self._pending: set[str] = set()

    def __getitem__(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise UnansweredQuestionError(name) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Answers({self._values!r})"

    def lookup(self, name: str, default: Any = None) -> Any:
        """Read an answer that may legitimately be missing.

        Returns:
            The answer, or default when the question was skipped or is not
            part of the session.

        Raises:
            UnansweredQuestionError: If the question is still pending.
        """
        if name in self._values:
            return self._values[name]
        if name in self._pending:
            raise UnansweredQuestionError(name)
        return default

    def expect(self, names: Iterable[str]) -> None:
        """Mark questions as pending until the session settles them."""
        self._pending.update(n for n in names if n not in self._values)

    def settle(self, name: str) -> None:
        """Mark a question as evaluated, whether it was asked or skipped."""
        self._pending.discard(name)

    def record(self, name: str, value: Any) -> None:
        """Record the answer the user gave for a question."""
        if name in self._values:
            raise AnswerAlreadySetError(f"Answer for '{name}' is already set")
        self._values[name] = value
        self._pending.discard(name)

    def assign_implicit(self, name: str, value: Any) -> None:
        """Assign an answer for a question that will not be presented.

        Repeating the same implicit assignment is allowed.
        """
        if name in self._values and (name not in self._implicit or self._values[name] != value):
            raise AnswerAlreadySetError(f"Answer for '{name}' is already set")
        self._values[name] = value
        self._implicit.add(name)
        self._pending.discard(name)

    def is_implicit(self, name: str) -> bool:
        """Check whether an answer was assigned without asking."""
        return name in self._implicit

    def to_dict(self) -> dict[str, Any]:
        """Return a plain copy of the answers."""
        return dict(self._values)


@dataclass(frozen=True)
class Separator:
    """Non-selectable divider in a choice list."""

    line: str = "──────────────"


class ChoiceFactory(Protocol):
    """Constructors the rendering side uses for choice-list items."""

    def separator(self) -> Any:
        ...

    def choice(self, name: str, value: Any) -> Any:
        ...


class DefaultChoiceFactory:
    """Builds czprompt's own Separator and Choice items."""

    def separator(self) -> Separator:
        return Separator()

    def choice(self, name: str, value: Any) -> Choice:
        return Choice(name=name, value=value)


Predicate = Callable[[Answers], bool]
Validator = Callable[[Any], Union[bool, str]]


@dataclass(frozen=True)
class Question:
    """One question of the commit sequence.

    Attributes:
        name: Unique name; the answer is stored under it.
        kind: Prompt widget kind.
        message: Prompt text.
        choices: Static list, or a callable of the answers so far.
        when: Presence predicate. None means always present.
        validate: Returns True or a rejection message.
        filter: Transforms the raw value before it is validated and stored.
        default: Default value (an index into choices for expand prompts).
        preview: Computes text to show right before the question is asked.
    """

    name: str
    kind: QuestionKind
    message: str
    choices: Union[list, Callable[[Answers], list], None] = None
    when: Optional[Predicate] = None
    validate: Optional[Validator] = None
    filter: Optional[Callable[[Any], Any]] = None
    default: Any = None
    preview: Optional[Callable[[Answers], str]] = field(default=None, compare=False)

    def is_present(self, answers: Answers) -> bool:
        """Evaluate the presence predicate against the answers so far."""
        if self.when is None:
            return True
        return bool(self.when(answers))

    def resolve_choices(self, answers: Answers) -> list:
        """Resolve the choice list against the answers so far."""
        if self.choices is None:
            return []
        if callable(self.choices):
            return list(self.choices(answers))
        return list(self.choices)

    def apply_filter(self, value: Any) -> Any:
        """Apply the output filter, if any."""
        if self.filter is None:
            return value
        return self.filter(value)

    def check(self, value: Any) -> Union[bool, str]:
        """Run the validator.

        Returns:
            True if the value is accepted, otherwise a rejection message.
        """
        if self.validate is None:
            return True
        result = self.validate(value)
        if result is True:
            return True
        if not result:
            return "Invalid value"
        return str(result)
