"""Rendering of diagnostics for terminal and machine-readable output."""

import json

from doccheck.models import Diagnostic

BOLD_YELLOW = "\033[1;33m"
BOLD_BRIGHT_BLUE = "\033[1;94m"
RESET = "\033[0m"

SEVERITY = "warning"


def _paint(text: str, style: str, *, color: bool) -> str:
    if not color:
        return text
    return f"{style}{text}{RESET}"


def format_diagnostic(diagnostic: Diagnostic, *, color: bool = False) -> str:
    """Format a diagnostic as a two-line, compiler-style warning."""
    severity = _paint(SEVERITY, BOLD_YELLOW, color=color)
    arrow = _paint("-->", BOLD_BRIGHT_BLUE, color=color)
    return (
        f"{severity}: Missing doc for `{diagnostic.name}`\n"
        f"  {arrow} {diagnostic.location}"
    )


def format_diagnostic_json(diagnostic: Diagnostic) -> str:
    """Format a diagnostic as a single-line JSON record."""
    record = {
        "severity": SEVERITY,
        "name": diagnostic.name,
        "kind": diagnostic.kind.value,
        "file": diagnostic.location.file_path,
        "line": diagnostic.location.line,
        "column": diagnostic.location.column,
    }
    return json.dumps(record, ensure_ascii=False)
