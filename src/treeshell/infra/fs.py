from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the host-side file access used by the shell: resolution of the
per-user data directory, path normalization, and whole-file text reads and
writes for the persisted namespace. Only the raw I/O lives here; callers
translate OSError into domain errors.
"""

import os
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeShell"
UNIX_APP_DIR_NAME = ".treeshell"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeShell
    - Linux/Mac: ~/.treeshell

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a host file path string into an absolute path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# TEXT I/O API
# -----------------------------------------------------------------------------

def read_text_lines(path: str) -> List[str]:
    """
    Read a whole UTF-8 text file and return its lines without terminators.

    Raises:
        OSError: If the file is missing or unreadable.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def write_text_file(path: str, content: str) -> str:
    """
    Write 'content' to 'path' as UTF-8, creating parent directories.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the directory cannot be created or the write fails.
    """
    target = os.path.abspath(path)
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(target, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    return target


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
