"""Logic for resolving the member packages of a Cargo workspace."""

import json
import logging
import subprocess
from pathlib import Path
from typing import Any

from doccheck.errors import WorkspaceMetadataFailure

logger = logging.getLogger(__name__)


def cargo_metadata(manifest_path: Path) -> dict[str, Any]:
    """Run `cargo metadata` for a manifest and return the decoded JSON."""
    cmd = [
        "cargo",
        "metadata",
        "--format-version",
        "1",
        "--no-deps",
        "--manifest-path",
        str(manifest_path),
    ]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, check=True, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise WorkspaceMetadataFailure(manifest_path, "cargo not found") from exc
    except subprocess.CalledProcessError as exc:
        reason = (exc.stderr or "").strip() or f"cargo exited with {exc.returncode}"
        raise WorkspaceMetadataFailure(manifest_path, reason) from exc

    try:
        metadata = json.loads(proc.stdout)
    except json.JSONDecodeError as exc:
        raise WorkspaceMetadataFailure(manifest_path, f"invalid JSON: {exc}") from exc
    if not isinstance(metadata, dict):
        raise WorkspaceMetadataFailure(manifest_path, "unexpected metadata layout")
    return metadata


def member_roots(metadata: dict[str, Any]) -> list[Path]:
    """Return the package directories of the workspace members.

    Members come back in `workspace_members` order.
    """
    manifests = {
        pkg.get("id"): pkg.get("manifest_path")
        for pkg in metadata.get("packages") or []
        if isinstance(pkg, dict)
    }
    roots = []
    for member_id in metadata.get("workspace_members") or []:
        manifest = manifests.get(member_id)
        if manifest:
            roots.append(Path(manifest).parent)
        else:
            logger.warning("Workspace member %s has no package entry", member_id)
    return roots


def resolve_workspace_roots(project_root: Path) -> list[Path]:
    """Resolve the package directories of the workspace at project_root."""
    manifest_path = project_root / "Cargo.toml"
    if not manifest_path.is_file():
        raise WorkspaceMetadataFailure(manifest_path, "manifest not found")

    roots = member_roots(cargo_metadata(manifest_path))
    if not roots:
        raise WorkspaceMetadataFailure(manifest_path, "no workspace members")
    logger.info("Resolved %d workspace members", len(roots))
    return roots
