from __future__ import annotations

"""
Error Taxonomy.

Every failure raised by the parsing and planting core derives from SeedError
and carries the context (depth, field, path or counts) needed to explain it
to the user without a traceback.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from treeseed.domain.tree_models import Report


class SeedError(Exception):
    """Base class for all tree parsing and planting failures."""


class EmptyInputError(SeedError):
    """The input carries no tree at all."""


class InvalidJSONError(SeedError):
    """The JSON document could not be decoded."""


class UnsupportedFormatError(SeedError):
    """The requested input format has no parser."""

    def __init__(self, fmt: str):
        self.fmt = fmt
        super().__init__(f"unsupported parser format: {fmt}")


class InvalidNameError(SeedError):
    """A node name cannot be used as a single filesystem entry."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"invalid node name {name!r}: {reason}")


class TreeStructureError(SeedError):
    """
    An ASCII line cannot be attached to the tree built so far.

    Attributes:
        depth: Depth of the missing parent.
        name: Name of the node that could not be placed.
        line_number: 1-based line of the offending node, when known.
    """

    def __init__(self, message: str, *, depth: int, name: str, line_number: Optional[int] = None):
        self.depth = depth
        self.name = name
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FileWithChildrenError(TreeStructureError):
    """A node classified as a file was given children."""

    def __init__(self, name: str, *, depth: int, line_number: Optional[int] = None):
        super().__init__(
            f"file node {name!r} cannot have children "
            f"(append '/' to its name to mark it as a directory)",
            depth=depth,
            name=name,
            line_number=line_number,
        )


class SchemaValidationError(SeedError):
    """A JSON node violates the expected schema."""

    def __init__(self, message: str, *, field: str, node_path: str = ""):
        self.field = field
        self.node_path = node_path
        where = f" at {node_path}" if node_path else ""
        super().__init__(f"{message}{where}")


class CountMismatchError(SeedError):
    """The report trailer disagrees with the converted tree."""

    def __init__(self, expected: Report, actual: Report):
        self.expected = expected
        self.actual = actual
        super().__init__(
            "file system count mismatch - "
            f"expected: {expected.directories} directories and {expected.files} files, "
            f"got: {actual.directories} directories and {actual.files} files"
        )


class MaterializationError(SeedError):
    """A directory or file could not be created on disk."""

    def __init__(self, path: str, kind: str, cause: OSError):
        self.path = path
        self.kind = kind
        super().__init__(f"failed to create {kind} {path}: {cause.strerror or cause}")


class InputSourceError(SeedError):
    """The tree text could not be obtained from its source."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source} read error: {message}")
