from __future__ import annotations

"""
Domain Constants.

Centralizes the persisted-format tokens, default file names and shell
defaults shared by the namespace core and the interface layers.
"""

from typing import List

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# PERSISTED FORMAT
# -----------------------------------------------------------------------------

DEFAULT_STATE_FILE = "FileSystemDefault.txt"
RECORD_SEPARATOR = "\t"
PATH_SEPARATOR = "/"

# Leaf names that can never be stored as a node
RESERVED_NAMES = (".", "..")
FORBIDDEN_NAME_CHARS = ("\t", "\r", "\n")

# -----------------------------------------------------------------------------
# SHELL DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_PROMPT = "$ "
DEFAULT_LOCALE = "en"

# Display order of the command menu
MENU_ORDER: List[str] = [
    "mkdir", "rmdir", "cd", "ls", "pwd", "creat",
    "rm", "save", "reload", "menu", "quit",
]
