"""Shared fixtures for checker tests."""

from collections.abc import Callable

import pytest

from doccheck.doc_checker import DocChecker
from doccheck.models import Diagnostic
from doccheck.parse_source import parse_source


@pytest.fixture
def check() -> Callable[..., list[Diagnostic]]:
    """Fixture that parses a Rust snippet and returns its diagnostics."""

    def _check(code: str, path: str = "src/lib.rs") -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        DocChecker(diagnostics.append).visit_file(parse_source(code, path))
        return diagnostics

    return _check
