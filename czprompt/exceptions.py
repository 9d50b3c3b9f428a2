"""Exception classes for czprompt.

Contains:
- CzPromptError: Base exception for all czprompt errors
- ConfigError: Raised when the configuration is malformed
- UnansweredQuestionError: Raised when an answer is read before it is collected
- AnswerAlreadySetError: Raised when a collected answer would be overwritten
"""


class CzPromptError(Exception):
    """Base exception for czprompt errors."""

    pass


class ConfigError(CzPromptError):
    """Raised when the configuration cannot be used to build questions."""

    pass


class UnansweredQuestionError(CzPromptError, KeyError):
    """Raised when a question reads an answer that has not been collected yet."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Answer for '{self.name}' has not been collected yet"


class AnswerAlreadySetError(CzPromptError):
    """Raised when an answer that is already recorded would be overwritten."""

    pass
