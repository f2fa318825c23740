"""Logic for loading the checker configuration."""

import logging
from pathlib import Path
from typing import Any

import yaml

from doccheck.deep_merge import deep_merge
from doccheck.errors import ConfigError
from doccheck.reporter import COLOR_MODES, OUTPUT_FORMATS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "doccheck.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "source_dir": "src",
    "extensions": [".rs"],
    "workspace": False,
    "fail_on_missing": False,
    "output": {
        "format": "text",
        "color": "auto",
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigError(f"Cannot read configuration {p}: {exc}") from exc
            except yaml.YAMLError as exc:
                raise ConfigError(f"Invalid configuration in {p}: {exc}") from exc
            if not isinstance(user_config, dict):
                raise ConfigError(f"Configuration in {p} must be a mapping")
            config = deep_merge(config, user_config)
            logger.debug("Loaded configuration from %s", p)
        else:
            logger.debug("No configuration at %s, using defaults", p)
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Reject settings the checker cannot honor."""
    output = config.get("output")
    if not isinstance(output, dict):
        msg = f"output must be a mapping, got {output!r}"
        raise ConfigError(msg)
    if output.get("format") not in OUTPUT_FORMATS:
        msg = f"Unknown output format: {output.get('format')!r}"
        raise ConfigError(msg)
    if output.get("color") not in COLOR_MODES:
        msg = f"Unknown color mode: {output.get('color')!r}"
        raise ConfigError(msg)

    extensions = config.get("extensions")
    if not isinstance(extensions, list) or not extensions:
        msg = "extensions must be a non-empty list"
        raise ConfigError(msg)
    if not all(isinstance(ext, str) and ext for ext in extensions):
        msg = f"extensions must be non-empty strings, got {extensions!r}"
        raise ConfigError(msg)

    source_dir = config.get("source_dir")
    if not isinstance(source_dir, str) or not source_dir:
        msg = f"source_dir must be a non-empty string, got {source_dir!r}"
        raise ConfigError(msg)

    for key in ("workspace", "fail_on_missing"):
        if not isinstance(config.get(key), bool):
            msg = f"{key} must be true or false, got {config.get(key)!r}"
            raise ConfigError(msg)
