"""Command-line entry point for the documentation checker.

Scans the Rust sources of a crate (or of every member of a Cargo
workspace) and prints a warning for each function, struct, enum, trait,
constant and associated item that has no doc comment.
"""

import argparse
import logging
from pathlib import Path

from doccheck.errors import DocCheckError
from doccheck.reporter import COLOR_MODES, OUTPUT_FORMATS
from doccheck.run_check import run_check

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the checker."""
    ap = argparse.ArgumentParser(
        prog="doccheck",
        description="Report Rust declarations that lack a documentation comment.",
    )
    ap.add_argument(
        "project_root",
        nargs="?",
        type=Path,
        default=Path(),
        help="Crate or workspace root (default: current directory)",
    )
    ap.add_argument(
        "--workspace",
        action="store_true",
        help="Scan every workspace member resolved via `cargo metadata`",
    )
    ap.add_argument(
        "--source-dir",
        help="Source directory inside each package (default: src)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: doccheck.yml if present)",
    )
    ap.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Diagnostic output format (default: text)",
    )
    ap.add_argument(
        "--color",
        choices=COLOR_MODES,
        help="Colorize text output (default: auto)",
    )
    ap.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with status 1 when any declaration is undocumented",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the documentation check."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_check(args)
    except DocCheckError as exc:
        logger.debug("Aborting run", exc_info=True)
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    raise SystemExit(main())
