"""Logic for reading source files."""

from pathlib import Path

from doccheck.errors import FileReadFailure


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadFailure(path, str(exc)) from exc
