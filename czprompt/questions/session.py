"""Session loop that walks the question list.

The loop is strictly sequential: every question's predicate, choices and
validator see only the answers recorded before it. Asking the user is
delegated to a prompter; the loop itself does no I/O apart from handing
the confirmation preview to the emit callable.
"""

from typing import Any, Callable, Optional, Protocol

from czprompt.logging import get_logger
from czprompt.questions.models import Answers, Question

log = get_logger(__name__)


class Prompter(Protocol):
    """Obtains raw values from the user.

    Implementations may also define ``reject(question, message)`` to show
    a validation message before the question is asked again.
    """

    def ask(self, question: Question, choices: list, answers: Answers) -> Any:
        ...


def run_session(
    questions: list[Question],
    prompter: Prompter,
    *,
    emit: Optional[Callable[[str], None]] = None,
    answers: Optional[Answers] = None,
) -> Answers:
    """Ask every present question in order and collect the answers.

    Args:
        questions: Final question list from build().
        prompter: Asks the user for a raw value.
        emit: Receives preview text right before its question is asked.
        answers: Answers to start from. A new empty set by default.

    Returns:
        The collected answers.
    """
    answers = answers if answers is not None else Answers()
    answers.expect(q.name for q in questions)
    reject = getattr(prompter, "reject", None)

    for question in questions:
        present = question.is_present(answers)
        answers.settle(question.name)
        if not present:
            log.debug("question_skipped", question=question.name)
            continue

        choices = question.resolve_choices(answers)

        if question.preview is not None and emit is not None:
            emit(question.preview(answers))

        while True:
            value = question.apply_filter(prompter.ask(question, choices, answers))
            result = question.check(value)
            if result is True:
                break
            log.debug("answer_rejected", question=question.name, reason=result)
            if reject is not None:
                reject(question, result)

        answers.record(question.name, value)
        log.debug("answer_recorded", question=question.name)

    return answers
