"""Validation rules for the commit question graph.

Pure functions, usable on their own:
- is_wip: Work-in-progress type classifier
- is_valid_ticket_number / validate_ticket_number: Ticket-number checks
- validate_subject_length: Subject length limit
- transform_subject_case: First-letter case of the subject
- split_prepared_commit: Subject/body defaults from a prepared commit message
- has_scopes / resolve_scope_choices / is_breaking_allowed: Type-dependent lookups
"""

import re
from typing import Any, Optional, Union

from czprompt.config.constants import DEFAULT_SUBJECT_LIMIT
from czprompt.config.models import CzConfig
from czprompt.questions.constants import CUSTOM_SCOPE, WIP
from czprompt.questions.models import ChoiceFactory

PREPARED_COMMIT_CONTEXTS = ("subject", "body")

# Joins body lines into the single-line body answer
BODY_LINE_SEPARATOR = "|"

COMMENT_CHAR = "#"

# Only CRLF, CR and LF end a line
NEWLINE_RE = re.compile(r"\r\n|\r|\n")


def is_wip(type_value: Any) -> bool:
    """Check whether a type marks work in progress (case-insensitive)."""
    return isinstance(type_value, str) and type_value.lower() == WIP


def is_valid_ticket_number(value: Optional[str], config: CzConfig) -> bool:
    """Check a ticket number against the configuration.

    An empty value is valid only when a ticket number is not required. A
    non-empty value is valid when no pattern is configured, or when removing
    every match of the pattern leaves nothing behind.

    Args:
        value: The entered ticket number.
        config: Configuration with the ticket settings.

    Returns:
        True if the ticket number is acceptable.
    """
    if not value:
        return not config.is_ticket_number_required
    if not config.ticket_number_reg_exp:
        return True
    return re.sub(config.ticket_number_reg_exp, "", value) == ""


def validate_ticket_number(value: Optional[str], config: CzConfig) -> Union[bool, str]:
    """Validator form of is_valid_ticket_number.

    Returns:
        True, or a message explaining the rejection.
    """
    if is_valid_ticket_number(value, config):
        return True
    if not value:
        return "A ticket number is required"
    return f"Ticket number must match the pattern {config.ticket_number_reg_exp}"


def validate_subject_length(value: str, config: CzConfig) -> Union[bool, str]:
    """Reject subjects longer than the configured limit.

    Returns:
        True, or a message naming the limit.
    """
    limit = config.subject_limit or DEFAULT_SUBJECT_LIMIT
    if len(value) > limit:
        return f"Exceed limit: {limit}"
    return True


def transform_subject_case(value: str, config: CzConfig) -> str:
    """Upper- or lower-case the first character of the subject."""
    if not value:
        return value
    first = value[0].upper() if config.upper_case_subject else value[0].lower()
    return first + value[1:]


def split_prepared_commit(text: Optional[str], context: str) -> Optional[str]:
    """Extract a default value from a prepared commit message.

    Comment lines and blank lines are dropped; any newline convention is
    accepted.

    Args:
        text: The prepared commit message, or None.
        context: "subject" for the first line, "body" for the remaining
            lines joined with "|".

    Returns:
        The default value, or None when there is nothing to offer.

    Raises:
        ValueError: If the context is unknown.
    """
    if context not in PREPARED_COMMIT_CONTEXTS:
        raise ValueError(f"Unknown prepared commit context: {context!r}")
    if not text:
        return None

    lines = [
        line
        for line in NEWLINE_RE.split(text)
        if line.strip() and not line.startswith(COMMENT_CHAR)
    ]
    if not lines:
        return None

    if context == "subject":
        return lines[0]
    if len(lines) > 1:
        return BODY_LINE_SEPARATOR.join(lines[1:])
    return None


def has_scopes(type_value: Any, config: CzConfig) -> bool:
    """Check whether a type has at least one configured scope."""
    return len(config.get_scopes_for_type(type_value)) > 0


def resolve_scope_choices(type_value: Any, config: CzConfig, factory: ChoiceFactory) -> list:
    """Build the scope choice list for a type.

    The per-type override is used when present, else the global scopes. When
    custom scopes are allowed or the list is empty, a separator plus "empty"
    and "custom" entries are appended.
    """
    scopes: list = config.get_scopes_for_type(type_value)
    if config.allow_custom_scopes or not scopes:
        scopes.extend([
            factory.separator(),
            factory.choice("empty", False),
            factory.choice("custom", CUSTOM_SCOPE),
        ])
    return scopes


def is_breaking_allowed(type_value: Any, config: CzConfig) -> bool:
    """Check whether breaking changes may be declared for a type."""
    if not isinstance(type_value, str):
        return False
    allowed = {name.lower() for name in config.allow_breaking_changes}
    return type_value.lower() in allowed
