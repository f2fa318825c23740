"""Tree walker that reports declarations without documentation."""

import logging
from collections.abc import Callable

from doccheck.classify import classify
from doccheck.has_documentation import has_documentation
from doccheck.models import Diagnostic
from doccheck.parse_source import ParsedSource
from doccheck.source_location import source_location

logger = logging.getLogger(__name__)


class DocChecker:
    """Walks parsed files and sends a Diagnostic to the sink for each miss."""

    def __init__(self, sink: Callable[[Diagnostic], None]) -> None:
        """Initialize the checker with the callable that receives diagnostics."""
        self.sink = sink

    def visit_file(self, parsed: ParsedSource) -> int:
        """Walk one file in pre-order and return the number of diagnostics.

        Every node is classified and then its children are always visited,
        so impl and trait bodies, modules and function bodies are checked
        whether or not their owner was reported.
        """
        emitted = 0
        # Explicit stack: deeply nested expressions would exhaust recursion.
        stack = [parsed.tree.root_node]
        while stack:
            node = stack.pop()

            declaration = classify(node)
            if declaration is not None and not has_documentation(
                declaration.attributes
            ):
                location = source_location(
                    declaration.start_node, parsed.source, parsed.path
                )
                self.sink(
                    Diagnostic(
                        name=declaration.name,
                        kind=declaration.kind,
                        location=location,
                    )
                )
                emitted += 1

            stack.extend(reversed(node.named_children))

        logger.debug("%s: %d undocumented declarations", parsed.path, emitted)
        return emitted
