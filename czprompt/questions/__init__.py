"""Commit question graph.

This package provides:
- constants: QuestionKind, QuestionName, CONFIRM_CHOICES, PREVIEW_SEPARATOR
- models: Question, Answers, Separator, ChoiceFactory, DefaultChoiceFactory
- rules: Pure validation and lookup rules
- builder: build_questions, build
- policy: skip_questions, move_breaking_first, apply_policy
- session: run_session, Prompter
"""

from czprompt.questions.constants import (
    CONFIRM_CHOICES,
    CUSTOM_SCOPE,
    PREVIEW_SEPARATOR,
    WIP,
    QuestionKind,
    QuestionName,
)
from czprompt.questions.models import (
    Answers,
    ChoiceFactory,
    DefaultChoiceFactory,
    Question,
    Separator,
)
from czprompt.questions.rules import (
    is_valid_ticket_number,
    is_wip,
    split_prepared_commit,
    transform_subject_case,
    validate_subject_length,
    validate_ticket_number,
)
from czprompt.questions.policy import apply_policy, move_breaking_first, skip_questions
from czprompt.questions.builder import build, build_questions
from czprompt.questions.session import Prompter, run_session


__all__ = [
    # Constants
    "CONFIRM_CHOICES",
    "CUSTOM_SCOPE",
    "PREVIEW_SEPARATOR",
    "WIP",
    "QuestionKind",
    "QuestionName",
    # Models
    "Answers",
    "ChoiceFactory",
    "DefaultChoiceFactory",
    "Question",
    "Separator",
    # Rules
    "is_valid_ticket_number",
    "is_wip",
    "split_prepared_commit",
    "transform_subject_case",
    "validate_subject_length",
    "validate_ticket_number",
    # Policy
    "apply_policy",
    "move_breaking_first",
    "skip_questions",
    # Builder
    "build",
    "build_questions",
    # Session
    "Prompter",
    "run_session",
]
