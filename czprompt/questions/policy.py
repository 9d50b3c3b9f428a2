"""Post-build policy for the question list.

Contains:
- skip_questions: Drop questions named in the skip list
- move_breaking_first: Put the breaking-change question at the front
- apply_policy: Both of the above, driven by the configuration
"""

from collections.abc import Iterable

from czprompt.config.models import CzConfig
from czprompt.questions.constants import QuestionName
from czprompt.questions.models import Question


def skip_questions(questions: list[Question], skip: Iterable[str]) -> list[Question]:
    """Remove questions whose name is in the skip list, keeping order."""
    skip = set(skip)
    return [q for q in questions if q.name not in skip]


def move_breaking_first(questions: list[Question]) -> list[Question]:
    """Move the breaking-change question to the front.

    The other questions keep their relative order. Lists without a
    breaking-change question are returned unchanged.
    """
    breaking = [q for q in questions if q.name == QuestionName.BREAKING.value]
    others = [q for q in questions if q.name != QuestionName.BREAKING.value]
    return breaking + others


def apply_policy(questions: list[Question], config: CzConfig) -> list[Question]:
    """Apply the configured skip list, then the breaking-first ordering."""
    questions = skip_questions(questions, config.skip_questions)
    if config.ask_for_breaking_change_first:
        questions = move_breaking_first(questions)
    return questions
