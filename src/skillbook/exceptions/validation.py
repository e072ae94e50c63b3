"""Problems found while validating a skillbook.yaml file."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby


@dataclass(frozen=True)
class ValidationError:
    """One config problem, addressed by the dotted key it belongs to.

    ``key`` is empty when the problem concerns the whole file (missing file,
    unparseable YAML, non-mapping document).
    """

    code: str
    path: str
    key: str
    message: str
    suggestion: str = ""
    line: int | None = None
    column: int | None = None

    @property
    def location(self) -> str:
        """``key`` when set, else ``line:column`` when known, else empty."""
        if self.key:
            return self.key
        if self.line is None:
            return ""
        return f"{self.line}:{self.column}" if self.column is not None else str(self.line)

    def format(self) -> str:
        """Render as one indented line for display under the file header."""
        text = f"  {self.code} {self.location}: {self.message}" if self.location else f"  {self.code} {self.message}"
        if self.suggestion:
            text = f"{text}; {self.suggestion}"
        return text


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by file, then by config key, then by code."""
    return sorted(errors, key=lambda e: (e.path, e.key, e.line or 0, e.code))


def format_errors(errors: list[ValidationError]) -> str:
    """Render errors grouped under one header line per config file."""
    lines: list[str] = []
    for path, group in groupby(sort_errors(errors), key=lambda e: e.path):
        lines.append(f"{path}:")
        lines.extend(error.format() for error in group)
    return "\n".join(lines)
