"""Configuration normalization for czprompt.

Contains:
- build_ticket_number_message: Default prompt for the ticket-number question
- normalize_config: Produce an effective configuration with every optional field set
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from czprompt.config.constants import (
    DEFAULT_SUBJECT_LIMIT,
    MESSAGE_DEFAULTS,
    TICKET_NUMBER_PATTERN_PREFIX,
)
from czprompt.config.models import CzConfig, Messages
from czprompt.exceptions import ConfigError


def build_ticket_number_message(messages: Messages, ticket_number_reg_exp: Optional[str]) -> str:
    """Resolve the prompt text for the ticket-number question.

    Args:
        messages: The configured (possibly partial) messages.
        ticket_number_reg_exp: The configured ticket pattern, if any.

    Returns:
        The custom ticket-number message if set; otherwise the custom pattern
        message or a generated one when a pattern is configured; otherwise the
        plain default prompt.
    """
    if messages.ticket_number:
        return messages.ticket_number
    if ticket_number_reg_exp:
        return (
            messages.ticket_number_pattern
            or f"{TICKET_NUMBER_PATTERN_PREFIX} ({ticket_number_reg_exp})\n"
        )
    return MESSAGE_DEFAULTS["ticket_number"]


def normalize_config(raw: Union[CzConfig, Mapping[str, Any], None]) -> CzConfig:
    """Produce the effective configuration.

    The input is never modified; a new CzConfig is returned.

    Args:
        raw: A CzConfig, a configuration mapping (camelCase or snake_case
            keys), or None for an empty configuration.

    Returns:
        CzConfig whose messages are all non-empty and whose subject limit is set.

    Raises:
        ConfigError: If the mapping does not describe a valid configuration.
    """
    if isinstance(raw, CzConfig):
        config = raw
    else:
        try:
            config = CzConfig.model_validate(dict(raw or {}))
        except (ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    messages = config.messages
    filled = {
        field: getattr(messages, field) or default
        for field, default in MESSAGE_DEFAULTS.items()
    }
    filled["ticket_number"] = build_ticket_number_message(messages, config.ticket_number_reg_exp)

    return config.model_copy(
        update={
            "messages": messages.model_copy(update=filled),
            "subject_limit": config.subject_limit or DEFAULT_SUBJECT_LIMIT,
        }
    )
