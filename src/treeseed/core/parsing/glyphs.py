from __future__ import annotations

"""
Tree Glyph Analysis.

Line-level helpers for ASCII tree diagrams: nesting depth from the leading
indentation units, bare node names with every structural glyph removed, and
the file/directory naming heuristic.
"""

from treeseed.domain.constants import (
    BRANCH_UNITS,
    CONNECTOR_CHARS,
    CONTINUATION_UNITS,
    NBSP,
    PATH_SEPARATORS,
    ROOT_SENTINEL,
    UNIT_WIDTH,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_line(line: str) -> str:
    """Replace non-breaking spaces (common in pasted diagrams) with spaces."""
    return line.replace(NBSP, " ")


def get_depth(line: str) -> int:
    """
    Compute the nesting depth of a single tree line.

    The line is consumed in 4-character units from the left. Continuation
    units ('│   ' or four spaces) add one level each; a branch unit
    ('├── ' or '└── ') adds one level and ends the indentation. The first
    character that does not start a recognized unit also ends the scan.

    Args:
        line: Raw line, without its trailing newline.

    Returns:
        int: Depth, 0 when no recognized unit leads the line.
    """
    line = normalize_line(line)
    depth = 0
    i = 0
    while i < len(line):
        unit = line[i:i + UNIT_WIDTH]
        if unit in BRANCH_UNITS:
            return depth + 1
        if unit in CONTINUATION_UNITS:
            depth += 1
            i += UNIT_WIDTH
            continue
        break
    return depth


def extract_name(line: str) -> str:
    """
    Strip every structural glyph from a line and return the bare name.

    Trailing path separators left over from `tree -F` style output are
    removed as well.

    Returns:
        str: The node name, or '' for blank/structural-only lines.
    """
    name = normalize_line(line).strip()
    for unit in BRANCH_UNITS + CONTINUATION_UNITS:
        name = name.replace(unit, "")
    for char in CONNECTOR_CHARS:
        name = name.replace(char, "")
    return name.strip().rstrip(PATH_SEPARATORS).strip()


def has_directory_marker(line: str) -> bool:
    """True if the entry was written with a trailing '/' or '\\'."""
    stripped = normalize_line(line).strip()
    return len(stripped) > 1 and stripped[-1] in PATH_SEPARATORS


def looks_like_file(name: str) -> bool:
    """
    Naming heuristic: a name containing '.' is a file, except '.' itself.

    Extensionless files and dotted directory names (e.g. 'v1.2') are
    misclassified unless the line carries a trailing '/'.
    """
    return "." in name and name != ROOT_SENTINEL


def classify(line: str, name: str) -> bool:
    """Return True if the entry named on `line` should be created as a file."""
    if has_directory_marker(line):
        return False
    return looks_like_file(name)
