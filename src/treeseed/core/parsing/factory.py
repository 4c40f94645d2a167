from __future__ import annotations

"""
Parser Dispatch.

Maps an input format to the parser that turns raw text into a TreeNode.
"""

from typing import Callable, Dict

from treeseed.core.parsing.ascii_builder import parse_ascii_tree
from treeseed.core.parsing.json_converter import parse_json_tree
from treeseed.domain.tree_models import Format, TreeNode

TreeParser = Callable[[str], TreeNode]

_PARSERS: Dict[Format, TreeParser] = {
    Format.TREE: parse_ascii_tree,
    Format.JSON: parse_json_tree,
}


def get_parser(fmt: "str | Format" = Format.TREE) -> TreeParser:
    """
    Resolve the parser for a format name.

    Raises:
        UnsupportedFormatError: If no parser handles the format.
    """
    return _PARSERS[Format.parse(fmt)]


def parse_tree(text: str, fmt: "str | Format" = Format.TREE) -> TreeNode:
    """Parse `text` with the parser registered for `fmt`."""
    return get_parser(fmt)(text)
