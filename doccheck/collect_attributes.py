"""Logic for collecting the outer attributes attached to a declaration."""

from tree_sitter import Node

from doccheck.models import Attribute

COMMENT_KINDS = {"line_comment", "block_comment"}


def is_outer_doc_comment(text: str) -> bool:
    """Check if a comment is an outer doc comment (`///` or `/** */`)."""
    if text.startswith("///"):
        return not text.startswith("////")
    if text.startswith("/**"):
        return not text.startswith("/***") and not text.startswith("/**/")
    return False


def is_inner_doc_comment(text: str) -> bool:
    """Check if a comment documents the enclosing item (`//!` or `/*! */`)."""
    return text.startswith(("//!", "/*!"))


def attribute_name(attribute_item: Node) -> str:
    """Return the path of an `#[...]` attribute, e.g. `doc` or `serde::rename`."""
    if not attribute_item.named_children:
        return ""
    attribute = attribute_item.named_children[0]
    if not attribute.named_children:
        return ""
    path = attribute.named_children[0]
    return path.text.decode("utf-8") if path.text else ""


def collect_attributes(node: Node) -> list[Attribute]:
    """Collect the outer attributes preceding a declaration, in source order.

    Plain comments between attributes are skipped. Anything else, including
    inner attributes and inner doc comments, ends the attribute list.
    """
    attributes: list[Attribute] = []
    sibling = node.prev_named_sibling
    while sibling is not None:
        if sibling.type == "attribute_item":
            attributes.append(Attribute(name=attribute_name(sibling), node=sibling))
        elif sibling.type in COMMENT_KINDS:
            text = sibling.text.decode("utf-8") if sibling.text else ""
            if is_inner_doc_comment(text):
                break
            if is_outer_doc_comment(text):
                attributes.append(Attribute(name="doc", node=sibling))
        else:
            break
        sibling = sibling.prev_named_sibling
    attributes.reverse()
    return attributes
