"""Shared utility functions for CLI commands."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from czprompt.config import CONFIG_FILE_NAMES, CzConfig, find_config_file, load_config_file
from czprompt.exceptions import ConfigError
from czprompt.git import get_repo_root


def load_raw_config(config_path: Optional[Path] = None) -> dict[str, Any]:
    """Load the raw configuration mapping.

    Args:
        config_path: Explicit config file. When None, the repository root is
            searched for one of CONFIG_FILE_NAMES.

    Returns:
        Raw configuration dictionary.

    Raises:
        ConfigError: If no config file is found or it cannot be loaded.
        GitError: If no path is given and we are not in a git repository.
    """
    if config_path is None:
        repo_root = get_repo_root()
        config_path = find_config_file(repo_root)
        if config_path is None:
            raise ConfigError(
                f"No configuration file found in {repo_root} "
                f"(looked for {', '.join(CONFIG_FILE_NAMES)})"
            )
    return load_config_file(config_path)


def format_answers(answers: Mapping[str, Any], config: Optional[CzConfig] = None) -> str:
    """Render the collected answers as ``name: value`` lines for the preview.

    Empty answers are left out.
    """
    lines = []
    for name, value in answers.items():
        if value is None or value is False or value == "":
            continue
        lines.append(f"{name}: {value}")
    return "\n".join(lines)
