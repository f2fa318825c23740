"""Predicate for checking if a declaration carries a documentation attribute."""

from collections.abc import Iterable

from doccheck.models import Attribute


def has_documentation(attributes: Iterable[Attribute]) -> bool:
    """Check if at least one attribute is a documentation attribute."""
    return any(attr.is_documentation for attr in attributes)
