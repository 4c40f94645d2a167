from __future__ import annotations

"""
Domain Constants.

Centralizes the application identity, the glyph alphabet understood by the
ASCII tree parser and the filesystem defaults used when planting a tree.
"""

from typing import Tuple

APP_NAME = "TreeSeed"
APP_VERSION = "0.1.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# Root name standing for "the current directory"
ROOT_SENTINEL = "."

# Optional header line emitted by `tree` and commonly copy-pasted with it
TREE_HEADER = "tree"

# Permission bits for every directory created during materialization
DIRECTORY_MODE = 0o755

# -----------------------------------------------------------------------------
# ASCII TREE GLYPHS
# -----------------------------------------------------------------------------

UNIT_WIDTH = 4

CONTINUATION_UNITS: Tuple[str, ...] = ("│   ", "    ")
BRANCH_UNITS: Tuple[str, ...] = ("├── ", "└── ")
CONNECTOR_CHARS: Tuple[str, ...] = ("│", "└", "├", "─")

PATH_SEPARATORS = "/\\"
NBSP = " "
