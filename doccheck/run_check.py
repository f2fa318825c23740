"""Orchestration logic for checking a project for undocumented declarations."""

import argparse
import logging
from pathlib import Path
from typing import Any, TextIO

from doccheck.discover_files import discover_files
from doccheck.doc_checker import DocChecker
from doccheck.errors import ConfigError
from doccheck.load_config import DEFAULT_CONFIG_NAME, load_config, validate_config
from doccheck.parse_source import parse_source
from doccheck.read_source import read_source
from doccheck.reporter import Reporter
from doccheck.workspace_roots import resolve_workspace_roots

logger = logging.getLogger(__name__)


def run_check(args: argparse.Namespace, stream: TextIO | None = None) -> int:
    """Check every source file of the project and return the exit status."""
    project_root = args.project_root.resolve()
    config = _load_run_config(args, project_root)

    reporter = Reporter(
        stream,
        output_format=config["output"]["format"],
        color=config["output"]["color"],
    )
    checker = DocChecker(reporter.report)

    for source_root in _source_roots(project_root, config):
        for path in discover_files(source_root, config["extensions"]):
            display = _display_path(path, project_root)
            content = read_source(path)
            parsed = parse_source(content, display)
            reporter.file_started(display)
            checker.visit_file(parsed)

    reporter.finish()
    logger.info(
        "Checked %d files, %d undocumented declarations",
        reporter.files,
        reporter.count,
    )

    if config["fail_on_missing"] and reporter.count:
        return 1
    return 0


def _load_run_config(args: argparse.Namespace, project_root: Path) -> dict[str, Any]:
    """Load the YAML configuration and apply command-line overrides."""
    config_path = args.config
    if config_path is not None:
        if not Path(config_path).exists():
            msg = f"Configuration file not found: {config_path}"
            raise ConfigError(msg)
    elif (project_root / DEFAULT_CONFIG_NAME).exists():
        config_path = project_root / DEFAULT_CONFIG_NAME

    config = load_config(config_path)

    if args.source_dir is not None:
        config["source_dir"] = args.source_dir
    if args.workspace:
        config["workspace"] = True
    if args.fail_on_missing:
        config["fail_on_missing"] = True
    if args.format is not None:
        config["output"]["format"] = args.format
    if args.color is not None:
        config["output"]["color"] = args.color

    validate_config(config)
    return config


def _source_roots(project_root: Path, config: dict[str, Any]) -> list[Path]:
    """Return the source directories to scan, one per package."""
    if config["workspace"]:
        packages = resolve_workspace_roots(project_root)
    else:
        packages = [project_root]
    return [pkg / config["source_dir"] for pkg in packages]


def _display_path(path: Path, project_root: Path) -> str:
    """Show paths relative to the project root where possible."""
    try:
        return str(path.relative_to(project_root))
    except ValueError:
        return str(path)
