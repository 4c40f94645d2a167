from __future__ import annotations

"""
ASCII Tree Builder.

Folds the lines of a box-drawing tree diagram (as printed by `tree`) into a
rooted TreeNode hierarchy, using each line's depth as the only structural
signal.
"""

import logging
from typing import Dict, List, Tuple

from treeseed.core.parsing.glyphs import classify, extract_name, get_depth
from treeseed.domain.constants import TREE_HEADER
from treeseed.domain.errors import (
    EmptyInputError,
    FileWithChildrenError,
    TreeStructureError,
)
from treeseed.domain.tree_models import TreeNode, validate_name

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_ascii_tree(text: str) -> TreeNode:
    """
    Parse a full ASCII tree diagram.

    A leading line reading exactly 'tree' (the shell command that produced
    the diagram) is discarded; the first remaining non-blank line names the
    root.

    Args:
        text: The raw diagram.

    Returns:
        TreeNode: The root of the parsed hierarchy.

    Raises:
        EmptyInputError: If no root line is present.
        TreeStructureError: If a line has no parent at the preceding depth.
        InvalidNameError: If a name cannot denote a single entry.
    """
    lines = text.strip().splitlines()
    if lines and lines[0].strip() == TREE_HEADER:
        lines = lines[1:]

    numbered = [(i, line) for i, line in enumerate(lines, start=1) if line.strip()]
    if not numbered:
        raise EmptyInputError("no tree provided")

    return build_tree(numbered)


def build_tree(lines: List[Tuple[int, str]]) -> TreeNode:
    """
    Build the hierarchy from numbered, non-blank lines.

    Args:
        lines: (line_number, raw_line) pairs; the first one names the root.

    Returns:
        TreeNode: Root node at depth 0.
    """
    if not lines:
        raise EmptyInputError("no lines to parse")

    root_line_no, root_line = lines[0]
    root_name = extract_name(root_line)
    if not root_name:
        raise EmptyInputError("a root is required")
    validate_name(root_name, allow_sentinel=True)

    root = TreeNode(name=root_name, is_file=classify(root_line, root_name), depth=0)

    # Most recent node seen at each depth; holds references only, the
    # children lists own the nodes.
    last_nodes: Dict[int, TreeNode] = {0: root}

    for line_no, line in lines[1:]:
        name = extract_name(line)
        if not name:
            continue

        depth = get_depth(line)
        parent = last_nodes.get(depth - 1)
        if parent is None:
            raise TreeStructureError(
                f"invalid tree structure: missing parent at depth {depth - 1} for node {name}",
                depth=depth - 1,
                name=name,
                line_number=line_no,
            )
        if parent.is_file:
            raise FileWithChildrenError(parent.name, depth=parent.depth, line_number=line_no)

        validate_name(name)
        node = parent.add_child(TreeNode(name=name, is_file=classify(line, name)))

        # A new node at this depth ends every deeper branch of its predecessor
        for stale in [d for d in last_nodes if d > depth]:
            del last_nodes[stale]
        last_nodes[depth] = node

    directories, files = root.count()
    logger.debug(
        f"ASCII tree parsed from line {root_line_no}: "
        f"{directories} directories, {files} files."
    )
    return root
