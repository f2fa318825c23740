"""Tests for declaration classification and attribute collection."""

from unittest.mock import MagicMock

from tree_sitter import Node

from doccheck.classify import classify
from doccheck.collect_attributes import (
    collect_attributes,
    is_inner_doc_comment,
    is_outer_doc_comment,
)
from doccheck.has_documentation import has_documentation
from doccheck.models import Attribute, DeclarationKind
from doccheck.parse_source import parse_source


def _nodes(code: str, node_type: str) -> list[Node]:
    """Return every node of the given type in pre-order."""
    found = []
    stack = [parse_source(code, "lib.rs").tree.root_node]
    while stack:
        node = stack.pop()
        if node.type == node_type:
            found.append(node)
        stack.extend(reversed(node.children))
    return found


def test_classify_struct() -> None:
    """Verify a struct is classified with its name and attributes."""
    (node,) = _nodes("#[derive(Debug)]\nstruct Point;\n", "struct_item")
    declaration = classify(node)
    assert declaration is not None
    assert declaration.kind == DeclarationKind.STRUCT
    assert declaration.name == "Point"
    assert [a.name for a in declaration.attributes] == ["derive"]
    assert declaration.start_node.type == "attribute_item"


def test_classify_free_and_associated_functions() -> None:
    """Verify the same node type classifies differently inside an impl."""
    code = "fn free() {}\nimpl S {\n    fn method(&self) {}\n}\n"
    free, method = _nodes(code, "function_item")
    assert classify(free).kind == DeclarationKind.FUNCTION  # type: ignore[union-attr]
    assert (
        classify(method).kind  # type: ignore[union-attr]
        == DeclarationKind.IMPLEMENTED_FUNCTION
    )


def test_classify_associated_constant() -> None:
    """Verify constants inside impl blocks use the associated kind."""
    code = "const A: u8 = 1;\nimpl S {\n    const B: u8 = 2;\n}\n"
    top, assoc = _nodes(code, "const_item")
    assert classify(top).kind == DeclarationKind.CONSTANT  # type: ignore[union-attr]
    assert (
        classify(assoc).kind  # type: ignore[union-attr]
        == DeclarationKind.IMPLEMENTED_CONSTANT
    )


def test_classify_unrecognized_nodes() -> None:
    """Verify non-declaration nodes are not applicable."""
    code = "use std::fmt;\ntype Id = u64;\nmod m {}\nimpl S {}\nstatic X: u8 = 0;\n"
    for node_type in (
        "use_declaration",
        "type_item",
        "mod_item",
        "impl_item",
        "static_item",
        "source_file",
    ):
        for node in _nodes(code, node_type):
            assert classify(node) is None


def test_classify_extern_function_signature() -> None:
    """Verify bodiless functions outside traits are not applicable."""
    code = 'extern "C" {\n    fn abs(x: i32) -> i32;\n}\n'
    (node,) = _nodes(code, "function_signature_item")
    assert classify(node) is None


def test_collect_attributes_in_source_order() -> None:
    """Verify attributes and doc comments are collected top to bottom."""
    code = (
        "fn before() {}\n"
        "#[derive(Debug)]\n"
        "/// Docs.\n"
        "// plain\n"
        "#[serde::rename]\n"
        "struct S;\n"
    )
    (node,) = _nodes(code, "struct_item")
    assert [a.name for a in collect_attributes(node)] == [
        "derive",
        "doc",
        "serde::rename",
    ]


def test_collect_attributes_stops_at_inner_attribute() -> None:
    """Verify inner attributes of the module are not collected."""
    code = '#![doc = "crate"]\nfn f() {}\n'
    (node,) = _nodes(code, "function_item")
    assert collect_attributes(node) == []


def test_doc_comment_predicates() -> None:
    """Verify the outer and inner doc comment prefixes."""
    assert is_outer_doc_comment("/// docs")
    assert is_outer_doc_comment("/** docs */")
    assert not is_outer_doc_comment("//// not docs")
    assert not is_outer_doc_comment("/*** not docs */")
    assert not is_outer_doc_comment("/**/")
    assert not is_outer_doc_comment("// plain")
    assert is_inner_doc_comment("//! module docs")
    assert is_inner_doc_comment("/*! module docs */")
    assert not is_inner_doc_comment("/// docs")


def test_has_documentation() -> None:
    """Verify only `doc` attributes count as documentation."""
    node = MagicMock()
    assert not has_documentation([])
    assert not has_documentation([Attribute("derive", node), Attribute("cfg", node)])
    assert has_documentation([Attribute("derive", node), Attribute("doc", node)])


def test_declaration_is_hashable() -> None:
    """Verify classified declarations are immutable values usable in sets."""
    (node,) = _nodes("/// Docs.\n#[derive(Debug)]\nstruct Point;\n", "struct_item")
    declaration = classify(node)
    assert declaration is not None
    assert isinstance(declaration.attributes, tuple)
    assert len({declaration, classify(node)}) == 1
