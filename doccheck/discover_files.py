"""Logic for finding source files under a directory."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_files(root: Path, extensions: Iterable[str]) -> list[Path]:
    """Return all files under root with one of the extensions, sorted by path."""
    if not root.is_dir():
        logger.warning("Source directory %s does not exist, skipping", root)
        return []

    suffixes = {ext if ext.startswith(".") else f".{ext}" for ext in extensions}
    files = sorted(p for p in root.rglob("*") if p.is_file() and p.suffix in suffixes)
    logger.debug("Discovered %d files under %s", len(files), root)
    return files
