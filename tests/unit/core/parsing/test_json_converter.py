from __future__ import annotations

"""
Unit tests for the JSON Tree Validator and Converter.

Verifies:
1. Conversion of `tree -J` documents into TreeNode hierarchies.
2. Schema validation of nodes and the report trailer.
3. Reconciliation of the report totals against the converted tree.
"""

import json
from typing import Any, List

import pytest

from treeseed.core.parsing.json_converter import (
    convert_node,
    load_document,
    parse_json_tree,
    parse_report,
    reconcile,
    validate_node,
)
from treeseed.domain.errors import (
    CountMismatchError,
    EmptyInputError,
    InvalidJSONError,
    InvalidNameError,
    SchemaValidationError,
)
from treeseed.domain.tree_models import Report


def _doc(*elements: Any) -> str:
    return json.dumps(list(elements))


def _dir(name: str, contents: List[Any] = None) -> dict:
    node = {"type": "directory", "name": name}
    if contents is not None:
        node["contents"] = contents
    return node


def _file(name: str) -> dict:
    return {"type": "file", "name": name}


# -----------------------------------------------------------------------------
# Successful conversion
# -----------------------------------------------------------------------------

def test_parse_simple_document(simple_tree_json: str) -> None:
    root = parse_json_tree(simple_tree_json)

    assert root.name == "root"
    assert [c.name for c in root.children] == ["dir1", "dir2"]
    leaf = root.children[1].children[0]
    assert leaf.name == "file.txt"
    assert leaf.is_file is True
    assert leaf.depth == 2
    assert root.count() == (3, 1)


def test_document_without_report_is_accepted() -> None:
    root = parse_json_tree(_doc(_dir("root", [_file("a.txt")])))
    assert root.count() == (1, 1)


def test_unknown_type_becomes_directory() -> None:
    root = parse_json_tree(_doc(_dir("root", [{"type": "link", "name": "current"}])))
    assert root.children[0].is_file is False


def test_null_contents_counts_as_absent() -> None:
    root = parse_json_tree(_doc({"type": "directory", "name": "root", "contents": None}))
    assert root.children == []


def test_file_with_empty_contents_is_accepted() -> None:
    root = parse_json_tree(_doc(_dir("root", [{"type": "file", "name": "a.txt", "contents": []}])))
    assert root.children[0].is_file is True


def test_sentinel_root_counts_as_reported_directory() -> None:
    """`tree -J` reports include the '.' root in the directory total."""
    root = parse_json_tree(_doc(_dir(".", [_file("a.txt")]), {"type": "report", "directories": 1, "files": 1}))
    assert root.is_sentinel
    assert root.count() == (1, 1)


def test_sentinel_root_missing_from_report_is_a_mismatch() -> None:
    doc = _doc(_dir(".", [_file("a.txt")]), {"type": "report", "directories": 0, "files": 1})
    with pytest.raises(CountMismatchError) as exc_info:
        parse_json_tree(doc)
    assert exc_info.value.actual == Report(directories=1, files=1)


def test_convert_node_sets_depths() -> None:
    node = convert_node(_dir("a", [_dir("b", [_file("c.txt")])]))
    assert node.depth == 0
    assert node.children[0].depth == 1
    assert node.children[0].children[0].depth == 2


# -----------------------------------------------------------------------------
# Document-level errors
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("text", ["", "   \n"])
def test_blank_input_raises(text: str) -> None:
    with pytest.raises(EmptyInputError):
        parse_json_tree(text)


def test_empty_array_raises() -> None:
    with pytest.raises(EmptyInputError, match="empty JSON array"):
        load_document("[]")


def test_invalid_json_raises() -> None:
    with pytest.raises(InvalidJSONError) as exc_info:
        parse_json_tree('[{"type": "directory",')
    assert str(exc_info.value).startswith("invalid JSON")


def test_top_level_object_rejected() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        parse_json_tree(json.dumps(_dir("root")))
    assert exc_info.value.field == "document"


def test_too_many_elements_rejected() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        load_document(_doc(_dir("a"), {"type": "report", "directories": 1, "files": 0}, _dir("b")))
    assert exc_info.value.field == "document"


# -----------------------------------------------------------------------------
# Node schema errors
# -----------------------------------------------------------------------------

def test_missing_type_field() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        validate_node({"name": "root"})
    assert exc_info.value.field == "type"
    assert "missing type field" in str(exc_info.value)


def test_missing_name_in_nested_node_reports_path() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        validate_node(_dir("root", [_dir("src", [{"type": "file"}])]))

    err = exc_info.value
    assert err.field == "name"
    assert err.node_path == "root/src"
    assert "missing name field" in str(err)


def test_non_object_node_rejected() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        validate_node(_dir("root", ["a.txt"]))
    assert exc_info.value.field == "node"


def test_non_list_contents_rejected() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        validate_node({"type": "directory", "name": "root", "contents": {"a": 1}})
    assert exc_info.value.field == "contents"


def test_file_with_contents_rejected() -> None:
    doc = _doc(_dir("root", [{"type": "file", "name": "a.txt", "contents": [_file("b.txt")]}]))
    with pytest.raises(SchemaValidationError) as exc_info:
        parse_json_tree(doc)
    assert exc_info.value.field == "contents"
    assert exc_info.value.node_path == "root/a.txt"


def test_validation_runs_before_conversion() -> None:
    """A schema error deep in the tree is reported even after valid siblings."""
    doc = _doc(_dir("root", [_file("ok.txt"), _dir("sub", [{"name": "x"}])]))
    with pytest.raises(SchemaValidationError):
        parse_json_tree(doc)


@pytest.mark.parametrize("bad_name", ["a/b", "..", "."])
def test_invalid_child_names_rejected(bad_name: str) -> None:
    with pytest.raises(InvalidNameError):
        parse_json_tree(_doc(_dir("root", [_file(bad_name)])))


# -----------------------------------------------------------------------------
# Report handling
# -----------------------------------------------------------------------------

def test_count_mismatch_detected() -> None:
    doc = _doc(
        _dir("root", [_file("a.txt")]),
        {"type": "report", "directories": 1, "files": 2},
    )
    with pytest.raises(CountMismatchError) as exc_info:
        parse_json_tree(doc)

    err = exc_info.value
    assert err.expected == Report(directories=1, files=2)
    assert err.actual == Report(directories=1, files=1)
    assert str(err) == (
        "file system count mismatch - expected: 1 directories and 2 files, "
        "got: 1 directories and 1 files"
    )


@pytest.mark.parametrize("report", [
    {"type": "report", "directories": "1", "files": 0},
    {"type": "report", "directories": 1},
    {"type": "report", "directories": True, "files": 0},
])
def test_parse_report_requires_integer_counts(report: dict) -> None:
    with pytest.raises(SchemaValidationError):
        parse_report(report)


def test_parse_report_rejects_non_object() -> None:
    with pytest.raises(SchemaValidationError) as exc_info:
        parse_report([1, 2])
    assert exc_info.value.field == "report"


def test_reconcile_accepts_matching_totals(simple_tree_json: str) -> None:
    root = parse_json_tree(simple_tree_json)
    reconcile(root, Report(directories=3, files=1))
