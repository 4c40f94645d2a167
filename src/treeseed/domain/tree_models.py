from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the in-memory tree produced by both parsers (ASCII and JSON) and
consumed once by the filesystem materializer, plus the optional report
trailer used to reconcile JSON input.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple

from treeseed.domain.constants import PATH_SEPARATORS, ROOT_SENTINEL
from treeseed.domain.errors import InvalidNameError, UnsupportedFormatError

# -----------------------------------------------------------------------------
# INPUT FORMATS
# -----------------------------------------------------------------------------

class Format(str, Enum):
    """Supported textual representations of a directory hierarchy."""
    TREE = "tree"
    JSON = "json"

    @classmethod
    def parse(cls, value: "str | Format") -> "Format":
        """Resolve a user-supplied format name, case-insensitively."""
        if isinstance(value, Format):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedFormatError(str(value)) from None


def format_names() -> List[str]:
    return [f.value for f in Format]

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class TreeNode:
    """
    One filesystem entry to be planted.

    Nodes are compared by identity: a tree never holds the same node twice,
    and the child list is the only ownership edge between nodes.

    Attributes:
        name: Base name of the entry (no path separators).
        is_file: True for files, False for directories.
        children: Ordered child nodes, in input order.
        depth: Nesting level (root = 0).
    """
    name: str
    is_file: bool = False
    children: List["TreeNode"] = field(default_factory=list)
    depth: int = 0

    @property
    def is_sentinel(self) -> bool:
        """True for the '.' root that stands for the working directory."""
        return self.name == ROOT_SENTINEL

    def add_child(self, child: "TreeNode") -> "TreeNode":
        child.depth = self.depth + 1
        self.children.append(child)
        return child

    def walk(self) -> Iterator["TreeNode"]:
        """Yield this node and all its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def count(self) -> Tuple[int, int]:
        """
        Count every node of the tree, each in exactly one bucket.

        The '.' sentinel root counts as a directory, matching the report
        trailer written by `tree -J`.

        Returns:
            Tuple[int, int]: (directories, files).
        """
        directories = files = 0
        for node in self.walk():
            if node.is_file:
                files += 1
            else:
                directories += 1
        return directories, files


@dataclass(frozen=True)
class Report:
    """Expected totals asserted by a JSON report trailer."""
    directories: int
    files: int

    @classmethod
    def of(cls, root: TreeNode) -> "Report":
        directories, files = root.count()
        return cls(directories=directories, files=files)

# -----------------------------------------------------------------------------
# NAME RULES
# -----------------------------------------------------------------------------

def validate_name(name: str, *, allow_sentinel: bool = False) -> str:
    """
    Ensure a node name denotes exactly one entry below its parent.

    Args:
        name: Candidate base name.
        allow_sentinel: Accept '.' (only legal for the root).

    Returns:
        str: The name, unchanged.

    Raises:
        InvalidNameError: If the name is empty, '..', '.' where not allowed,
                          or contains a path separator.
    """
    if not name:
        raise InvalidNameError(name, "name is empty")
    if name == ROOT_SENTINEL and not allow_sentinel:
        raise InvalidNameError(name, "'.' is only allowed as the root")
    if name == "..":
        raise InvalidNameError(name, "parent references are not allowed")
    if any(sep in name for sep in PATH_SEPARATORS):
        raise InvalidNameError(name, "path separators are not allowed")
    return name
