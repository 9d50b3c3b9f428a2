"""Git helpers for czprompt.

- exceptions: GitError
- runner: run_git_command, get_repo_root, get_git_dir
- prepared: read_prepared_commit
"""

from czprompt.git.exceptions import GitError
from czprompt.git.runner import get_git_dir, get_repo_root, run_git_command
from czprompt.git.prepared import read_prepared_commit


__all__ = [
    "GitError",
    "get_git_dir",
    "get_repo_root",
    "read_prepared_commit",
    "run_git_command",
]
