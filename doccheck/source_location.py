"""Logic for converting tree-sitter positions into source locations."""

from tree_sitter import Node

from doccheck.models import SourceLocation


def source_location(node: Node, source: bytes, file_path: str) -> SourceLocation:
    """Return the 1-based line and character column where a node starts.

    tree-sitter reports columns in bytes, so the line prefix is decoded to
    count characters.
    """
    row, byte_column = node.start_point
    line_start = node.start_byte - byte_column
    prefix = source[line_start : node.start_byte].decode("utf-8", errors="replace")
    return SourceLocation(file_path=file_path, line=row + 1, column=len(prefix) + 1)
