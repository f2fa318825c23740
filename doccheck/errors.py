"""Fatal error types raised while checking a project."""

from pathlib import Path


class DocCheckError(Exception):
    """Base class for errors that abort a run."""


class ConfigError(DocCheckError):
    """The merged configuration contains an unusable value."""


class FileReadFailure(DocCheckError):
    """A discovered source file could not be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = str(path)
        self.reason = reason


class ParseFailure(DocCheckError):
    """A source file is not syntactically valid Rust."""

    def __init__(self, path: Path | str, line: int, column: int, reason: str) -> None:
        super().__init__(f"Failed to parse {path}:{line}:{column}: {reason}")
        self.path = str(path)
        self.line = line
        self.column = column
        self.reason = reason


class WorkspaceMetadataFailure(DocCheckError):
    """Workspace members could not be resolved from cargo metadata."""

    def __init__(self, manifest_path: Path | str, reason: str) -> None:
        super().__init__(
            f"Failed to read workspace metadata for {manifest_path}: {reason}"
        )
        self.path = str(manifest_path)
        self.reason = reason
