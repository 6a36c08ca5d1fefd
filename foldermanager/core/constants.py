# foldermanager/core/constants.py
"""
Project-wide constants.
Do not import from services or config here — this is a leaf module.
"""

APP_NAME = "FolderManager"
APP_VERSION = "0.1.0"

# Config
CONFIG_FILE_NAME = "config.txt"
DEFAULT_BASE_SUBDIR = "Projects"

# Folder names
MAX_NAME_LENGTH = 255
FORBIDDEN_CHARS = frozenset('<>:"/\\|?*')
RESERVED_NAMES = frozenset(["", ".", ".."])

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130
