"""Reader for a prepared but uncommitted commit message.

Git leaves the last prepared message in ``COMMIT_EDITMSG`` inside the git
directory, e.g. after an aborted commit.
"""

from pathlib import Path
from typing import Optional

from czprompt.git.exceptions import GitError
from czprompt.git.runner import get_git_dir
from czprompt.logging import get_logger

log = get_logger(__name__)

COMMIT_EDITMSG = "COMMIT_EDITMSG"


def read_prepared_commit(git_dir: Optional[Path] = None) -> Optional[str]:
    """Read the prepared commit message.

    Args:
        git_dir: The git directory. Looked up with git when None.

    Returns:
        The message text, or None when there is no repository, no message,
        or the message cannot be read as UTF-8.
    """
    if git_dir is None:
        try:
            git_dir = get_git_dir()
        except GitError as e:
            log.debug("prepared_commit_unavailable", reason=str(e))
            return None

    message_file = git_dir / COMMIT_EDITMSG
    if not message_file.is_file():
        return None

    try:
        return message_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("prepared_commit_unavailable", reason=str(e))
        return None
