"""Git-related exception classes."""

from czprompt.exceptions import CzPromptError


class GitError(CzPromptError):
    """Custom exception for git-related errors."""

    pass
