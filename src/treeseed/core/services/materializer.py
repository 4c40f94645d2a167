from __future__ import annotations

"""
Filesystem Materializer.

Walks a TreeNode hierarchy depth-first (pre-order) and creates the matching
directories and empty files. Shared by the ASCII and JSON input paths.

The walk stops at the first filesystem error. Entries created before the
failure stay on disk: there is no rollback.
"""

import logging
import os
from typing import List, Optional, Tuple, Union

from treeseed.domain.errors import FileWithChildrenError, MaterializationError
from treeseed.domain.pipeline_models import PlantedEntry
from treeseed.domain.tree_models import TreeNode, validate_name
from treeseed.infra.fs import ensure_directory, touch_file

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

KIND_FILE = "file"
KIND_DIRECTORY = "directory"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        root: TreeNode,
        base_path: str = "",
        *,
        logger: Optional[LoggerLike] = None,
        dry_run: bool = False,
        planted: Optional[List[PlantedEntry]] = None,
) -> List[PlantedEntry]:
    """
    Create every entry of the tree below `base_path`.

    The '.' sentinel root is not created itself; its children are planted
    directly into `base_path`. One INFO record is emitted per entry.

    Args:
        root: Root of the tree to plant.
        base_path: Parent directory ('' = current working directory).
        logger: Logging collaborator; defaults to this module's logger.
        dry_run: Log the planned entries without touching the filesystem.
        planted: Optional accumulator, left holding the entries created so
                 far if the walk aborts.

    Returns:
        List[PlantedEntry]: Entries in creation order.

    Raises:
        FileWithChildrenError: If a file node carries children.
        InvalidNameError: If a node name is not a single path component.
        MaterializationError: On the first filesystem failure.
    """
    log = logger or logging.getLogger(__name__)
    entries: List[PlantedEntry] = planted if planted is not None else []

    check_tree(root)
    _plant(root, base_path, log, dry_run, entries)
    return entries


def check_tree(root: TreeNode) -> None:
    """
    Pre-flight check run before any filesystem mutation.

    Raises:
        FileWithChildrenError: If a file node carries children.
        InvalidNameError: If a node name is not a single path component.
    """
    for node in root.walk():
        validate_name(node.name, allow_sentinel=node is root)
        if node.is_file and node.children:
            raise FileWithChildrenError(node.name, depth=node.depth)

# -----------------------------------------------------------------------------
# INTERNAL WALK
# -----------------------------------------------------------------------------

def _plant(
        root: TreeNode,
        base_path: str,
        log: LoggerLike,
        dry_run: bool,
        entries: List[PlantedEntry],
) -> None:
    # (node, parent path) pairs; children pushed in reverse keep pre-order
    stack: List[Tuple[TreeNode, str]] = [(root, base_path)]

    while stack:
        node, parent_path = stack.pop()
        current_path = parent_path

        if not node.is_sentinel:
            current_path = os.path.join(parent_path, node.name)
            if node.is_file:
                _plant_file(current_path, dry_run)
                kind = KIND_FILE
            else:
                _plant_directory(current_path, dry_run)
                kind = KIND_DIRECTORY

            entries.append(PlantedEntry(path=current_path, kind=kind))
            if dry_run:
                log.info("Would plant %s: %s", kind, current_path)
            else:
                log.info("Planted %s: %s", kind, current_path)

        stack.extend((child, current_path) for child in reversed(node.children))


def _plant_directory(path: str, dry_run: bool) -> None:
    if dry_run:
        return
    try:
        ensure_directory(path)
    except OSError as e:
        raise MaterializationError(path, KIND_DIRECTORY, e) from e


def _plant_file(path: str, dry_run: bool) -> None:
    if dry_run:
        return

    parent_dir = os.path.dirname(path)
    if parent_dir:
        try:
            ensure_directory(parent_dir)
        except OSError as e:
            raise MaterializationError(parent_dir, KIND_DIRECTORY, e) from e

    try:
        touch_file(path)
    except OSError as e:
        raise MaterializationError(path, KIND_FILE, e) from e
