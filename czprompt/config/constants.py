"""Constants for czprompt configuration.

Contains:
- MESSAGE_DEFAULTS: Built-in prompt text for every question
- TICKET_NUMBER_PATTERN_PREFIX: Prefix for the generated ticket-number prompt
- DEFAULT_SUBJECT_LIMIT: Subject length limit when none is configured
- CONFIG_FILE_NAMES: Configuration file names looked up in the repository root
"""

# Default prompt text, keyed by Messages field name
MESSAGE_DEFAULTS = {
    "type": "Select the type of change that you're committing:",
    "scope": "\nDenote the SCOPE of this change (optional):",
    "custom_scope": "Denote the SCOPE of this change:",
    "ticket_number": "Enter the ticket number:\n",
    "subject": "Write a SHORT, IMPERATIVE tense description of the change:\n",
    "body": 'Provide a LONGER description of the change (optional). Use "|" to break new line:\n',
    "breaking": "List any BREAKING CHANGES (optional):\n",
    "footer": "List any ISSUES CLOSED by this change (optional). E.g.: #31, #34:\n",
    "confirm_commit": "Are you sure you want to proceed with the commit above?",
}

TICKET_NUMBER_PATTERN_PREFIX = "Enter the ticket number following this pattern"

DEFAULT_SUBJECT_LIMIT = 100

# Looked up in order
CONFIG_FILE_NAMES = [
    ".cz-config.yaml",
    ".cz-config.yml",
]
