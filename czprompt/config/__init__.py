"""Configuration handling for czprompt.

This package provides:
- constants: MESSAGE_DEFAULTS, DEFAULT_SUBJECT_LIMIT, CONFIG_FILE_NAMES
- models: Choice, Messages, CzConfig
- normalize: normalize_config, build_ticket_number_message
- loader: find_config_file, load_config_file
"""

from czprompt.config.constants import (
    CONFIG_FILE_NAMES,
    DEFAULT_SUBJECT_LIMIT,
    MESSAGE_DEFAULTS,
    TICKET_NUMBER_PATTERN_PREFIX,
)
from czprompt.config.models import Choice, CzConfig, Messages
from czprompt.config.normalize import build_ticket_number_message, normalize_config
from czprompt.config.loader import find_config_file, load_config_file


__all__ = [
    # Constants
    "CONFIG_FILE_NAMES",
    "DEFAULT_SUBJECT_LIMIT",
    "MESSAGE_DEFAULTS",
    "TICKET_NUMBER_PATTERN_PREFIX",
    # Models
    "Choice",
    "CzConfig",
    "Messages",
    # Normalization
    "build_ticket_number_message",
    "normalize_config",
    # Loading
    "find_config_file",
    "load_config_file",
]
