"""Question graph builder.

Builds the ordered list of commit questions. Each question carries its own
presence predicate, choice generator, validator, default and filter, all
closed over the effective configuration. Predicates only read answers of
questions that come earlier in the list.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from czprompt.config.models import CzConfig
from czprompt.config.normalize import normalize_config
from czprompt.git.prepared import read_prepared_commit
from czprompt.logging import get_logger
from czprompt.questions.constants import (
    CONFIRM_CHOICES,
    CUSTOM_SCOPE,
    PREVIEW_SEPARATOR,
    QuestionKind,
    QuestionName,
)
from czprompt.questions.models import Answers, ChoiceFactory, DefaultChoiceFactory, Question
from czprompt.questions.policy import apply_policy
from czprompt.questions.rules import (
    has_scopes,
    is_breaking_allowed,
    is_wip,
    resolve_scope_choices,
    split_prepared_commit,
    transform_subject_case,
    validate_subject_length,
    validate_ticket_number,
)

log = get_logger(__name__)

# Turns the answers and configuration into a commit message
Formatter = Callable[[Mapping[str, Any], CzConfig], str]

# Returns the text of a prepared commit message, or None
PreparedCommitReader = Callable[[], Optional[str]]


def _type_answer(answers: Answers) -> Any:
    return answers[QuestionName.TYPE.value]


def build_questions(
    config: CzConfig,
    factory: Optional[ChoiceFactory] = None,
    *,
    formatter: Optional[Formatter] = None,
    read_prepared: PreparedCommitReader = read_prepared_commit,
) -> list[Question]:
    """Build the full, unfiltered question list.

    Args:
        config: Effective (normalized) configuration.
        factory: Constructors for separator and choice items in the scope list.
        formatter: Renders the commit preview shown before confirmation. When
            None the confirmation question has no preview.
        read_prepared: Reader for a prepared commit message. Only called when
            usePreparedCommit is set.

    Returns:
        Questions in asking order.
    """
    factory = factory or DefaultChoiceFactory()
    messages = config.messages

    subject_default = None
    body_default = None
    if config.use_prepared_commit:
        prepared = read_prepared()
        if prepared is None:
            log.debug("prepared_commit_missing")
        subject_default = split_prepared_commit(prepared, "subject")
        body_default = split_prepared_commit(prepared, "body")

    def scope_choices(answers: Answers) -> list:
        return resolve_scope_choices(_type_answer(answers), config, factory)

    def scope_when(answers: Answers) -> bool:
        commit_type = _type_answer(answers)
        if not has_scopes(commit_type, config):
            implicit = "" if config.skip_empty_scopes else CUSTOM_SCOPE
            answers.assign_implicit(QuestionName.SCOPE.value, implicit)
            log.debug("scope_assigned_implicitly", type=commit_type, scope=implicit)
            return False
        return not is_wip(commit_type)

    def custom_scope_when(answers: Answers) -> bool:
        # The scope question may have been skipped (wip type) or removed
        return answers.lookup(QuestionName.SCOPE.value) == CUSTOM_SCOPE

    def breaking_when(answers: Answers) -> bool:
        # Asked first, before any type exists
        if config.ask_for_breaking_change_first:
            return True
        return is_breaking_allowed(_type_answer(answers), config)

    def footer_when(answers: Answers) -> bool:
        return not is_wip(_type_answer(answers))

    def commit_preview(answers: Answers) -> str:
        return f"\n{PREVIEW_SEPARATOR}\n{formatter(answers, config)}\n{PREVIEW_SEPARATOR}\n"

    questions = [
        Question(
            name=QuestionName.TYPE.value,
            kind=QuestionKind.LIST,
            message=messages.type,
            choices=list(config.types),
        ),
        Question(
            name=QuestionName.SCOPE.value,
            kind=QuestionKind.LIST,
            message=messages.scope,
            choices=scope_choices,
            when=scope_when,
        ),
        Question(
            name=QuestionName.CUSTOM_SCOPE.value,
            kind=QuestionKind.INPUT,
            message=messages.custom_scope,
            when=custom_scope_when,
        ),
        Question(
            name=QuestionName.TICKET_NUMBER.value,
            kind=QuestionKind.INPUT,
            message=messages.ticket_number,
            # No ticket numbers unless allowed
            when=lambda answers: config.allow_ticket_number,
            validate=lambda value: validate_ticket_number(value, config),
        ),
        Question(
            name=QuestionName.SUBJECT.value,
            kind=QuestionKind.INPUT,
            message=messages.subject,
            default=subject_default,
            validate=lambda value: validate_subject_length(value, config),
            filter=lambda value: transform_subject_case(value, config),
        ),
        Question(
            name=QuestionName.BODY.value,
            kind=QuestionKind.INPUT,
            message=messages.body,
            default=body_default,
        ),
        Question(
            name=QuestionName.BREAKING.value,
            kind=QuestionKind.INPUT,
            message=messages.breaking,
            when=breaking_when,
        ),
        Question(
            name=QuestionName.FOOTER.value,
            kind=QuestionKind.INPUT,
            message=messages.footer,
            when=footer_when,
        ),
        Question(
            name=QuestionName.CONFIRM_COMMIT.value,
            kind=QuestionKind.EXPAND,
            message=messages.confirm_commit,
            choices=list(CONFIRM_CHOICES),
            default=0,
            preview=commit_preview if formatter is not None else None,
        ),
    ]

    return questions


def build(
    config: Union[CzConfig, Mapping[str, Any], None],
    factory: Optional[ChoiceFactory] = None,
    *,
    formatter: Optional[Formatter] = None,
    read_prepared: PreparedCommitReader = read_prepared_commit,
) -> list[Question]:
    """Build the final question list handed to the prompt renderer.

    Normalizes the configuration, builds the questions and applies the
    skip/reorder policy.

    Args:
        config: Raw configuration mapping or CzConfig.
        factory: Constructors for separator and choice items.
        formatter: Renders the commit preview shown before confirmation.
        read_prepared: Reader for a prepared commit message.

    Returns:
        Questions in asking order.

    Raises:
        ConfigError: If the configuration is malformed.
    """
    effective = normalize_config(config)
    questions = build_questions(
        effective,
        factory,
        formatter=formatter,
        read_prepared=read_prepared,
    )
    questions = apply_policy(questions, effective)
    log.debug("questions_built", questions=[q.name for q in questions])
    return questions
