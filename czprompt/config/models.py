"""Data models for czprompt configuration.

Contains:
- Choice: Pydantic model for a selectable option (type, scope, confirmation)
- Messages: Pydantic model holding one prompt template per question
- CzConfig: Pydantic model for the raw and the normalized configuration

Configuration files use the camelCase keys of commitizen configs
(``allowCustomScopes``, ``ticketNumberRegExp``, ...); they are accepted as
aliases next to the snake_case attribute names.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _coerce_choices(v: Any) -> list:
    """Turn a configured choice list into something Choice can validate.

    Plain strings become ``{"name": s}``; None becomes an empty list.
    """
    if v is None:
        return []
    if isinstance(v, (str, dict)):
        v = [v]
    if not isinstance(v, (list, tuple)):
        return v
    result = []
    for item in v:
        if isinstance(item, str):
            result.append({"name": item})
        else:
            result.append(item)
    return result


class Choice(BaseModel):
    """A selectable option.

    Attributes:
        name: Text shown to the user.
        value: Value stored in the answer set. Defaults to the name.
        key: Shortcut key for expand-style prompts.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: Any = None
    key: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def default_value_to_name(cls, data):
        """Use the name as value when no value is configured."""
        if isinstance(data, dict) and data.get("value") is None and "name" in data:
            data = {**data, "value": data["name"]}
        return data


class Messages(BaseModel):
    """Prompt templates, one per question. Unset fields are filled by normalization."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: Optional[str] = None
    scope: Optional[str] = None
    custom_scope: Optional[str] = Field(None, alias="customScope")
    ticket_number: Optional[str] = Field(None, alias="ticketNumber")
    ticket_number_pattern: Optional[str] = Field(None, alias="ticketNumberPattern")
    subject: Optional[str] = None
    body: Optional[str] = None
    breaking: Optional[str] = None
    footer: Optional[str] = None
    confirm_commit: Optional[str] = Field(None, alias="confirmCommit")


class CzConfig(BaseModel):
    """Configuration for building the commit question list."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    types: list[Choice] = []
    scopes: list[Choice] = []
    scope_overrides: dict[str, list[Choice]] = Field(default_factory=dict, alias="scopeOverrides")

    allow_custom_scopes: bool = Field(False, alias="allowCustomScopes")
    skip_empty_scopes: bool = Field(False, alias="skipEmptyScopes")

    # Ticket numbers
    allow_ticket_number: bool = Field(False, alias="allowTicketNumber")
    is_ticket_number_required: bool = Field(False, alias="isTicketNumberRequired")
    ticket_number_reg_exp: Optional[str] = Field(None, alias="ticketNumberRegExp")

    # Breaking changes
    ask_for_breaking_change_first: bool = Field(False, alias="askForBreakingChangeFirst")
    allow_breaking_changes: list[str] = Field(default_factory=list, alias="allowBreakingChanges")

    # Subject and body
    use_prepared_commit: bool = Field(False, alias="usePreparedCommit")
    upper_case_subject: bool = Field(False, alias="upperCaseSubject")
    subject_limit: Optional[int] = Field(None, alias="subjectLimit")

    messages: Messages = Field(default_factory=Messages)
    skip_questions: list[str] = Field(default_factory=list, alias="skipQuestions")

    @field_validator("types", "scopes", mode="before")
    @classmethod
    def ensure_choice_list(cls, v):
        """Accept plain strings as choices."""
        return _coerce_choices(v)

    @field_validator("scope_overrides", mode="before")
    @classmethod
    def ensure_override_lists(cls, v):
        """Accept plain strings as scope choices inside each override."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        return {type_name: _coerce_choices(scopes) for type_name, scopes in v.items()}

    @field_validator("allow_breaking_changes", "skip_questions", mode="before")
    @classmethod
    def ensure_name_list(cls, v):
        """Ensure name lists are lists."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("messages", mode="before")
    @classmethod
    def ensure_messages(cls, v):
        """Treat a missing messages section as empty."""
        if v is None:
            return {}
        return v

    @field_validator("ticket_number_reg_exp")
    @classmethod
    def check_ticket_pattern(cls, v):
        """Reject ticket patterns that do not compile."""
        if v:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"Invalid ticketNumberRegExp {v!r}: {e}")
        return v or None

    def get_scopes_for_type(self, type_value: Any) -> list[Choice]:
        """Get the scope choices for a type, respecting per-type overrides.

        Args:
            type_value: The selected type value.

        Returns:
            The override list when the type has one, else the global scopes.
        """
        if isinstance(type_value, str) and type_value in self.scope_overrides:
            return list(self.scope_overrides[type_value])
        return list(self.scopes)
