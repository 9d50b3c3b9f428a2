"""Commit message question graph for commitizen-style prompts."""

from importlib.metadata import version, PackageNotFoundError

from czprompt.config import CzConfig, normalize_config
from czprompt.exceptions import (
    AnswerAlreadySetError,
    ConfigError,
    CzPromptError,
    UnansweredQuestionError,
)
from czprompt.questions import Answers, Question, build, run_session

try:
    __version__ = version("czprompt")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"


__all__ = [
    "Answers",
    "AnswerAlreadySetError",
    "ConfigError",
    "CzConfig",
    "CzPromptError",
    "Question",
    "UnansweredQuestionError",
    "build",
    "normalize_config",
    "run_session",
]
