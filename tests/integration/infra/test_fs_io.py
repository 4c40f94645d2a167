from __future__ import annotations

"""
Integration tests for the FileSystem Infrastructure Layer.

Verifies path expansion, the user data directory and the low-level create
and read operations against a real temporary directory.
"""

import os
import stat
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from treeseed.infra.fs import (
    ensure_directory,
    get_user_data_dir,
    normalize_path,
    read_text_file,
    touch_file,
)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX data directory")
def test_user_data_dir_is_created(tmp_path: Path) -> None:
    with patch("treeseed.infra.fs.os.path.expanduser", return_value=str(tmp_path)):
        path = get_user_data_dir()

    assert path == os.path.abspath(tmp_path / ".treeseed")
    assert os.path.isdir(path)


def test_normalize_path_expands_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREESEED_TARGET", "planted")
    assert normalize_path("$TREESEED_TARGET/out") == "planted/out"


def test_normalize_path_keeps_relative_paths() -> None:
    assert normalize_path("out/dir") == "out/dir"


def test_normalize_path_fallback() -> None:
    assert normalize_path("", fallback="x") == "x"
    assert normalize_path(None) == ""
    assert normalize_path("   ") == ""


def test_ensure_directory_is_recursive_and_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    ensure_directory(str(target))
    ensure_directory(str(target))
    assert target.is_dir()


def test_ensure_directory_fails_on_existing_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OSError):
        ensure_directory(str(blocker))


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_ensure_directory_mode(tmp_path: Path) -> None:
    old_umask = os.umask(0)
    try:
        ensure_directory(str(tmp_path / "d"))
    finally:
        os.umask(old_umask)
    assert stat.S_IMODE((tmp_path / "d").stat().st_mode) == 0o755


def test_touch_file_truncates(tmp_path: Path) -> None:
    target = tmp_path / "f.txt"
    target.write_text("content", encoding="utf-8")
    touch_file(str(target))
    assert target.read_text(encoding="utf-8") == ""


def test_touch_file_missing_parent(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        touch_file(str(tmp_path / "missing" / "f.txt"))


def test_read_text_file_strips_bom(tmp_path: Path) -> None:
    target = tmp_path / "tree.txt"
    target.write_bytes("\ufeffroot\n└── a.txt\n".encode("utf-8"))
    assert read_text_file(str(target)) == "root\n└── a.txt\n"
