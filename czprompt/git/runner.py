"""Thin wrappers around the git executable.

Used to locate the repository so a prepared commit message can be read.
"""

import subprocess
from pathlib import Path

from czprompt.git.exceptions import GitError


def run_git_command(args: list[str]) -> str:
    """Run ``git <args>`` and return stripped stdout.

    Raises:
        GitError: On a non-zero exit, or when git is missing.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"git {' '.join(args)} exited with {e.returncode}: {e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("git executable not found")


def get_repo_root() -> Path:
    """Working tree root of the enclosing repository."""
    try:
        return Path(run_git_command(["rev-parse", "--show-toplevel"]))
    except GitError:
        raise GitError("Not inside a git working tree")


def get_git_dir() -> Path:
    """Absolute git directory; worktrees and submodules included."""
    return Path(run_git_command(["rev-parse", "--absolute-git-dir"]))
