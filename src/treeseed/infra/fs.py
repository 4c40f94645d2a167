from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and the low-level create operations
used to plant a tree. Acts as an abstraction over the 'os' module to ensure
uniform behavior across Windows and Unix-like systems.
"""

import os
from typing import Optional

from treeseed.domain.constants import DIRECTORY_MODE

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeSeed"
UNIX_APP_DIR_NAME = ".treeseed"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeSeed
    - Linux/Mac: ~/.treeseed

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Expand environment variables ($VAR/%VAR%) and '~' in a directory path.

    Relative paths stay relative so planted entries are reported the way the
    user wrote them. Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Value used when the input is empty.

    Returns:
        str: Expanded path.
    """
    p = (path or "").strip()
    if not p:
        return fallback
    return os.path.expandvars(os.path.expanduser(p))

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS API
# -----------------------------------------------------------------------------

def ensure_directory(path: str, mode: int = DIRECTORY_MODE) -> None:
    """
    Recursively create a directory; an existing directory is not an error.

    Raises:
        OSError: If the path exists as a file or creation is denied.
    """
    os.makedirs(path, mode=mode, exist_ok=True)


def touch_file(path: str) -> None:
    """
    Create an empty file, truncating it if it already exists.

    Raises:
        OSError: If the file cannot be opened for writing.
    """
    with open(path, "w", encoding="utf-8"):
        pass


def read_text_file(path: str) -> str:
    """
    Read a UTF-8 text file, tolerating a byte-order mark.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()
