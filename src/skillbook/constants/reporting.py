"""Constants for report files and stdout formatting."""

from __future__ import annotations

SUMMARY_JSON_FILENAME: str = "summary.json"
SUMMARY_MARKDOWN_FILENAME: str = "SUMMARY.md"
ATOMIC_TEMP_SUFFIX: str = ".tmp"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "markdown"})
DEFAULT_OUTPUT_FORMAT: str = "json"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

STATUS_COLORS: dict[str, str] = {
    "pass": ANSI_GREEN,
    "fail": ANSI_RED,
    "skip": ANSI_YELLOW,
}
