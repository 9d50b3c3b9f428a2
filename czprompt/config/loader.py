"""Configuration file lookup and loading.

Reads a ``.cz-config.yaml`` file from the repository root. The result is the
raw mapping; pass it to normalize_config to get an effective configuration.
"""

from pathlib import Path
from typing import Any, Optional

import yaml

from czprompt.config.constants import CONFIG_FILE_NAMES
from czprompt.exceptions import ConfigError


def find_config_file(repo_root: Path) -> Optional[Path]:
    """Find the configuration file in a repository root.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to the first existing config file, or None.
    """
    for name in CONFIG_FILE_NAMES:
        candidate = repo_root / name
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Load a raw configuration mapping from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Configuration dictionary. Empty dict for an empty file.

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping.
    """
    try:
        with open(path, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return config
