"""Classification of syntax nodes into documentable declarations."""

from tree_sitter import Node

from doccheck.collect_attributes import collect_attributes
from doccheck.models import Declaration, DeclarationKind

ITEM_KINDS: dict[str, DeclarationKind] = {
    "function_item": DeclarationKind.FUNCTION,
    "struct_item": DeclarationKind.STRUCT,
    "enum_item": DeclarationKind.ENUM,
    "trait_item": DeclarationKind.TRAIT,
    "const_item": DeclarationKind.CONSTANT,
}

# Items declared directly inside an impl block or a trait body.
ASSOCIATED_KINDS: dict[str, DeclarationKind] = {
    "function_item": DeclarationKind.IMPLEMENTED_FUNCTION,
    "function_signature_item": DeclarationKind.IMPLEMENTED_FUNCTION,
    "const_item": DeclarationKind.IMPLEMENTED_CONSTANT,
}

ASSOCIATED_SCOPES = {"impl_item", "trait_item"}


def is_associated(node: Node) -> bool:
    """Check if the node sits directly in the item list of an impl or trait."""
    body = node.parent
    if body is None or body.type != "declaration_list":
        return False
    owner = body.parent
    return owner is not None and owner.type in ASSOCIATED_SCOPES


def classify(node: Node) -> Declaration | None:
    """Classify a node as a documentable declaration.

    Returns None for every node kind that is not subject to the
    documentation requirement.
    """
    kinds = ASSOCIATED_KINDS if is_associated(node) else ITEM_KINDS
    kind = kinds.get(node.type)
    if kind is None:
        return None

    name_node = node.child_by_field_name("name")
    if name_node is None or not name_node.text:
        return None

    return Declaration(
        kind=kind,
        name=name_node.text.decode("utf-8"),
        attributes=tuple(collect_attributes(node)),
        node=node,
    )
