"""Logic for parsing Rust source text into a tree-sitter syntax tree."""

from collections.abc import Iterator
from dataclasses import dataclass

import tree_sitter_rust
from tree_sitter import Language, Node, Parser, Tree

from doccheck.errors import ParseFailure
from doccheck.source_location import source_location

RUST_LANGUAGE = Language(tree_sitter_rust.language())


@dataclass(frozen=True)
class ParsedSource:
    """A successfully parsed source file."""

    path: str  # as shown in diagnostics
    source: bytes
    tree: Tree


def _iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node under root in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _first_error(root: Node) -> Node | None:
    for node in _iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None


def parse_source(content: str, path: str) -> ParsedSource:
    """Parse Rust source, raising ParseFailure if it contains syntax errors."""
    source = content.encode("utf-8")
    tree = Parser(RUST_LANGUAGE).parse(source)

    if tree.root_node.has_error:
        error = _first_error(tree.root_node) or tree.root_node
        location = source_location(error, source, path)
        if error.is_missing:
            reason = f"expected `{error.type}`"
        else:
            reason = "syntax error"
        raise ParseFailure(path, location.line, location.column, reason)

    return ParsedSource(path=path, source=source, tree=tree)
