"""Constants for the commit question graph.

Contains:
- QuestionKind: Prompt widget kinds understood by the rendering side
- QuestionName: Names of the questions, in build order
- CONFIRM_CHOICES: Options of the final confirmation question
- PREVIEW_SEPARATOR: Line framing the commit preview
"""

from enum import Enum

from czprompt.config.models import Choice


class QuestionKind(Enum):
    """Prompt widget kinds."""

    LIST = "list"
    INPUT = "input"
    EXPAND = "expand"


class QuestionName(Enum):
    """Question names, in the order the builder emits them."""

    TYPE = "type"
    SCOPE = "scope"
    CUSTOM_SCOPE = "customScope"
    TICKET_NUMBER = "ticketNumber"
    SUBJECT = "subject"
    BODY = "body"
    BREAKING = "breaking"
    FOOTER = "footer"
    CONFIRM_COMMIT = "confirmCommit"


# Type value that marks work in progress (compared case-insensitively)
WIP = "wip"

# Scope answer that asks for a free-text scope
CUSTOM_SCOPE = "custom"

CONFIRM_CHOICES = [
    Choice(key="y", name="Yes", value="yes"),
    Choice(key="n", name="Abort commit", value="no"),
    Choice(key="e", name="Edit message", value="edit"),
]

PREVIEW_SEPARATOR = "###--------------------------------------------------------###"
