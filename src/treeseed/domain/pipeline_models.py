from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object returned by the planting engine to the interface
layer, together with its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PlantedEntry:
    """A directory or file created (or planned, on dry runs) on disk."""
    path: str
    kind: str


@dataclass(frozen=True)
class SeedResult:
    """
    Unified result of a parse + materialize run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Class name of the error that aborted the run.
        fmt: Input format used to parse the tree.
        target_dir: Directory the tree was planted into ('' = working dir).
        dry_run: True if nothing was written to disk.
        directories: Number of directories in the parsed tree.
        files: Number of files in the parsed tree.
        planted: Paths created (or planned) in creation order.
        summary: Extra execution metadata.
    """
    ok: bool
    error: str
    error_kind: str

    fmt: str
    target_dir: str
    dry_run: bool

    directories: int = 0
    files: int = 0
    planted: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: BaseException,
        fmt: str,
        target_dir: str,
        dry_run: bool = False,
        planted: Optional[List[PlantedEntry]] = None,
) -> SeedResult:
    """
    Create a failed result instance.

    Args:
        error: The exception that aborted the run.
        fmt: Input format requested.
        target_dir: Planting directory.
        dry_run: Whether the run was a simulation.
        planted: Entries already created before the failure (no rollback).

    Returns:
        SeedResult: An immutable error result object.
    """
    entries = planted or []
    return SeedResult(
        ok=False,
        error=str(error),
        error_kind=type(error).__name__,
        fmt=fmt,
        target_dir=target_dir,
        dry_run=dry_run,
        planted=[e.path for e in entries],
        summary={"partial": bool(entries)},
    )


def create_success_result(
        fmt: str,
        target_dir: str,
        dry_run: bool,
        directories: int,
        files: int,
        planted: List[PlantedEntry],
) -> SeedResult:
    """
    Create a successful result instance.

    Args:
        fmt: Input format used.
        target_dir: Planting directory.
        dry_run: Whether the run was a simulation.
        directories: Directory count of the parsed tree.
        files: File count of the parsed tree.
        planted: Entries created (or planned) in creation order.

    Returns:
        SeedResult: An immutable success result object.
    """
    return SeedResult(
        ok=True,
        error="",
        error_kind="",
        fmt=fmt,
        target_dir=target_dir,
        dry_run=dry_run,
        directories=directories,
        files=files,
        planted=[e.path for e in planted],
        summary={
            "planted_directories": sum(1 for e in planted if e.kind == "directory"),
            "planted_files": sum(1 for e in planted if e.kind == "file"),
        },
    )
