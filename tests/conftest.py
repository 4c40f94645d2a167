from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree samples and a helper to snapshot a planted directory.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Set, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def simple_tree_text() -> str:
    """The canonical four-entry diagram."""
    return (
        "root\n"
        "├── dir1\n"
        "└── dir2\n"
        "    └── file.txt\n"
    )


@pytest.fixture
def simple_tree_json() -> str:
    """JSON equivalent of `simple_tree_text`, with a matching report."""
    return (
        '[{"type":"directory","name":"root","contents":['
        '{"type":"directory","name":"dir1"},'
        '{"type":"directory","name":"dir2","contents":['
        '{"type":"file","name":"file.txt"}]}]},'
        '{"type":"report","directories":3,"files":1}]'
    )


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def snapshot() -> Callable[[Path], Tuple[Set[str], Set[str]]]:
    """
    Return a helper listing (directories, files) below a root, as
    forward-slash relative paths.
    """
    def _snapshot(root: Path) -> Tuple[Set[str], Set[str]]:
        dirs: Set[str] = set()
        files: Set[str] = set()
        for p in root.rglob("*"):
            rel = p.relative_to(root).as_posix()
            if p.is_dir():
                dirs.add(rel)
            else:
                files.add(rel)
        return dirs, files

    return _snapshot
