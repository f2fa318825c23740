"""Data models for declarations and the diagnostics reported about them."""

from dataclasses import dataclass
from enum import Enum

from tree_sitter import Node


class DeclarationKind(Enum):
    """Kinds of declarations that require a documentation comment."""

    FUNCTION = "function"
    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    CONSTANT = "constant"
    IMPLEMENTED_FUNCTION = "implemented_function"
    IMPLEMENTED_CONSTANT = "implemented_constant"


@dataclass(frozen=True)
class Attribute:
    """An outer attribute (`#[...]` or an outer doc comment) on a declaration."""

    name: str  # attribute path, "doc" for doc comments
    node: Node

    @property
    def is_documentation(self) -> bool:
        """Check if this attribute marks a documentation comment."""
        return self.name == "doc"


@dataclass(frozen=True)
class Declaration:
    """A classified syntax node that is subject to the documentation check."""

    kind: DeclarationKind
    name: str
    attributes: tuple[Attribute, ...]
    node: Node

    @property
    def start_node(self) -> Node:
        """Return the node where the declaration starts, attributes included."""
        if self.attributes:
            return self.attributes[0].node
        return self.node


@dataclass(frozen=True)
class SourceLocation:
    """A 1-based line and column in a source file."""

    file_path: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Diagnostic:
    """One undocumented declaration."""

    name: str
    kind: DeclarationKind
    location: SourceLocation
