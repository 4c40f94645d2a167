from __future__ import annotations

"""
JSON Tree Validator and Converter.

Accepts the document produced by `tree -J`: an array holding the root node
and, optionally, a report trailer with the expected directory/file totals.
The whole document is validated before conversion, and the report is
reconciled against the converted tree before anything is planted.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from treeseed.domain.errors import (
    CountMismatchError,
    EmptyInputError,
    InvalidJSONError,
    SchemaValidationError,
)
from treeseed.domain.tree_models import Report, TreeNode, validate_name

logger = logging.getLogger(__name__)

FILE_TYPE = "file"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_json_tree(text: str) -> TreeNode:
    """
    Parse, validate, convert and reconcile a JSON tree document.

    Args:
        text: Raw JSON text.

    Returns:
        TreeNode: Root of the converted hierarchy.

    Raises:
        EmptyInputError: Blank input or an empty array.
        InvalidJSONError: Unparseable JSON syntax.
        SchemaValidationError: A node or the report violates the schema.
        CountMismatchError: The report totals differ from the tree.
    """
    root_doc, report_doc = load_document(text)

    validate_node(root_doc)
    root = convert_node(root_doc)

    if report_doc is not None:
        reconcile(root, parse_report(report_doc))

    return root


def load_document(text: str) -> Tuple[Dict[str, Any], Optional[Any]]:
    """
    Decode the top-level array into (root node, optional report).
    """
    if not text or not text.strip():
        raise EmptyInputError("no tree provided")

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidJSONError(f"invalid JSON: {e}") from e

    if not isinstance(document, list):
        raise SchemaValidationError(
            f"expected a top-level array, received {type(document).__name__}",
            field="document",
        )
    if not document:
        raise EmptyInputError("empty JSON array")
    if len(document) > 2:
        raise SchemaValidationError(
            f"expected a root node and an optional report, received {len(document)} elements",
            field="document",
        )

    report_doc = document[1] if len(document) > 1 else None
    return document[0], report_doc


def validate_node(raw: Any, node_path: str = "") -> None:
    """
    Recursively check the node schema, depth-first.

    Every node needs non-empty string 'type' and 'name' fields; 'contents'
    is optional and validated recursively when present.

    Args:
        raw: Decoded node object.
        node_path: Slash-joined names of the ancestors, for error context.
    """
    if not isinstance(raw, dict):
        raise SchemaValidationError(
            f"invalid node: expected an object, received {type(raw).__name__}",
            field="node",
            node_path=node_path,
        )

    node_type = raw.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise SchemaValidationError("missing type field", field="type", node_path=node_path)

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaValidationError("missing name field", field="name", node_path=node_path)

    here = f"{node_path}/{name}" if node_path else name
    contents = _contents_of(raw, here)

    if node_type == FILE_TYPE and contents:
        raise SchemaValidationError(
            "file node cannot have contents", field="contents", node_path=here
        )

    for child in contents:
        validate_node(child, here)


def convert_node(raw: Dict[str, Any], depth: int = 0) -> TreeNode:
    """
    Convert a validated node into a TreeNode.

    Only type == 'file' yields a file; every other type is a directory.
    """
    name = validate_name(raw["name"], allow_sentinel=depth == 0)
    node = TreeNode(name=name, is_file=raw["type"] == FILE_TYPE, depth=depth)
    for child in raw.get("contents") or []:
        node.add_child(convert_node(child, depth + 1))
    return node


def parse_report(raw: Any) -> Report:
    """Validate the report trailer and return its expected totals."""
    if not isinstance(raw, dict):
        raise SchemaValidationError(
            f"invalid report: expected an object, received {type(raw).__name__}",
            field="report",
        )

    counts: Dict[str, int] = {}
    for key in ("directories", "files"):
        value = raw.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise SchemaValidationError(
                f"invalid report: '{key}' must be an integer", field=key
            )
        counts[key] = value

    return Report(directories=counts["directories"], files=counts["files"])


def reconcile(root: TreeNode, expected: Report) -> None:
    """
    Require the tree's totals to match the report exactly.

    Raises:
        CountMismatchError: On any difference.
    """
    actual = Report.of(root)
    if actual != expected:
        raise CountMismatchError(expected, actual)
    logger.debug(
        f"Report reconciled: {actual.directories} directories, {actual.files} files."
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _contents_of(raw: Dict[str, Any], node_path: str) -> List[Any]:
    contents = raw.get("contents")
    if contents is None:
        return []
    if not isinstance(contents, list):
        raise SchemaValidationError(
            f"invalid contents: expected an array, received {type(contents).__name__}",
            field="contents",
            node_path=node_path,
        )
    return contents
