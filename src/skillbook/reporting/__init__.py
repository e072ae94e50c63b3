"""Terminal and on-disk rendering of lint results."""

from .stdout import StdoutReporter
from .writer import build_summary_payload, render_markdown_summary, write_lint_reports

__all__ = ["StdoutReporter", "build_summary_payload", "render_markdown_summary", "write_lint_reports"]
