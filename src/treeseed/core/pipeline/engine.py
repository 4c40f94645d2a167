from __future__ import annotations

"""
Core planting pipeline.

Coordinates a single run:
1. Resolves the parser for the requested input format.
2. Parses and validates the tree (no filesystem access yet).
3. Materializes the tree under the target directory.
4. Packs the outcome into an immutable SeedResult.
"""

import logging
from typing import List, Optional, Union

from treeseed.core.parsing.factory import parse_tree
from treeseed.core.services.materializer import materialize
from treeseed.domain.errors import SeedError
from treeseed.domain.pipeline_models import (
    PlantedEntry,
    SeedResult,
    create_error_result,
    create_success_result,
)
from treeseed.domain.tree_models import Format

logger = logging.getLogger(__name__)


def plant_tree(
        text: str,
        *,
        fmt: Union[str, Format] = Format.TREE,
        target_dir: str = "",
        dry_run: bool = False,
        planter: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
) -> SeedResult:
    """
    Parse `text` and plant the resulting tree.

    Parsing and validation errors surface before anything is written.
    Filesystem errors abort the walk and leave already-created entries in
    place; the result then lists them in `planted`.

    Args:
        text: Tree representation (ASCII diagram or JSON document).
        fmt: Input format name.
        target_dir: Directory receiving the tree ('' = working directory).
        dry_run: If True, report the planned entries without writing.
        planter: Logging collaborator receiving one INFO per entry.

    Returns:
        SeedResult: Object containing status, counts and planted paths.
    """
    fmt_name = fmt.value if isinstance(fmt, Format) else str(fmt)
    planted: List[PlantedEntry] = []

    try:
        root = parse_tree(text, fmt)
        directories, files = root.count()
        logger.debug(
            f"Parsed {fmt_name} input: {directories} directories, {files} files."
        )

        materialize(root, target_dir, logger=planter, dry_run=dry_run, planted=planted)

    except SeedError as e:
        logger.debug(f"Planting aborted after {len(planted)} entries: {e}")
        return create_error_result(e, fmt_name, target_dir, dry_run, planted)

    return create_success_result(
        fmt=Format.parse(fmt).value,
        target_dir=target_dir,
        dry_run=dry_run,
        directories=directories,
        files=files,
        planted=planted,
    )
