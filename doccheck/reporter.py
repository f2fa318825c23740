"""Output sink for diagnostics and run progress."""

import os
import sys
from typing import TextIO

from doccheck.format_diagnostic import format_diagnostic, format_diagnostic_json
from doccheck.models import Diagnostic

OUTPUT_FORMATS = ("text", "json")
COLOR_MODES = ("auto", "always", "never")


def should_use_color(mode: str, stream: TextIO) -> bool:
    """Decide whether ANSI colors are written to the stream."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Reporter:
    """Writes diagnostics to a stream in the order they are reported."""

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        output_format: str = "text",
        color: str = "auto",
    ) -> None:
        """Initialize the reporter for an output stream, format and color mode."""
        self.stream = stream if stream is not None else sys.stdout
        self.output_format = output_format
        self.color = should_use_color(color, self.stream)
        self.count = 0
        self.files = 0

    def file_started(self, path: str) -> None:
        """Announce a file before its diagnostics."""
        self.files += 1
        if self.output_format == "text":
            print(f"Checking {path}", file=self.stream)

    def report(self, diagnostic: Diagnostic) -> None:
        """Write one diagnostic immediately."""
        self.count += 1
        if self.output_format == "json":
            print(format_diagnostic_json(diagnostic), file=self.stream)
        else:
            print(format_diagnostic(diagnostic, color=self.color), file=self.stream)

    def finish(self) -> None:
        """Write the closing summary line."""
        if self.output_format != "text":
            return
        print(
            f"\nFound {self.count} undocumented declaration(s) "
            f"in {self.files} file(s).",
            file=self.stream,
        )
