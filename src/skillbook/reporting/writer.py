"""Output writers for lint summary artifacts."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from skillbook.checks import check_titles
from skillbook.constants.checks import STATUS_FAIL, STATUS_PASS, STATUS_SKIP
from skillbook.constants.reporting import (
    SCHEMA_VERSION,
    SUMMARY_JSON_FILENAME,
    SUMMARY_MARKDOWN_FILENAME,
)
from skillbook.io import write_json_atomic, write_text_atomic
from skillbook.model import LintResult
from skillbook.types import JsonObject


def write_lint_reports(out_root: Path, result: LintResult, output_formats: tuple[str, ...]) -> list[Path]:
    """Write the requested summary files under ``out_root`` and return their paths."""
    written: list[Path] = []
    if "json" in output_formats:
        path = out_root / SUMMARY_JSON_FILENAME
        write_json_atomic(path, build_summary_payload(result))
        written.append(path)
    if "markdown" in output_formats:
        path = out_root / SUMMARY_MARKDOWN_FILENAME
        write_text_atomic(path, render_markdown_summary(result))
        written.append(path)
    return written


def build_summary_payload(result: LintResult) -> JsonObject:
    """Build the deterministic JSON summary for a lint run."""
    return {
        "schema_version": SCHEMA_VERSION,
        "root": str(result.root),
        "filter": result.filter_description,
        "fail_on": result.fail_on,
        "totals": {
            "tested": result.total,
            "passed": result.passed_count,
            "failed": result.failed_count,
            "utility": result.utility_count,
        },
        "counts_by_category": dict(result.category_counts),
        "counts_by_check": {check_id: dict(counts) for check_id, counts in result.check_counts().items()},
        "corpus": [check.to_dict() for check in result.corpus_results],
        "skills": [report.to_dict(result.fail_on) for report in result.reports],
        "warnings": list(result.warnings),
    }


def render_markdown_summary(result: LintResult, *, generated_at: datetime | None = None) -> str:
    """Render a SUMMARY.md document for a lint run."""
    stamp = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    lines = [
        "# Skill Structural Test Results",
        "",
        f"**Date:** {stamp}",
        f"**Base directory:** {result.root}",
        f"**Filter:** {result.filter_description}",
        "",
        "## Summary",
        "",
        "| Metric | Count |",
        "|--------|-------|",
        f"| Total tested | {result.total} |",
        f"| Passed | {result.passed_count} |",
        f"| Failed | {result.failed_count} |",
        f"| Utility | {result.utility_count} |",
        "",
    ]

    titles = check_titles()
    if result.corpus_results:
        lines.extend(["## Global Checks", "", "| Check | Result |", "|-------|--------|"])
        for check in result.corpus_results:
            lines.append(f"| {titles.get(check.check_id, check.check_id)} | {check.status.upper()} |")
        lines.append("")

    failed = result.failed_reports
    if failed:
        lines.extend(["## Failed Skills", ""])
        for report in failed:
            lines.append(f"- {report.skill} ({report.category})")
            for failure in report.failures(result.fail_on):
                lines.append(f"  - {failure.check_id}: {failure.message}")
        lines.append("")

    lines.extend(["## Results by Check", "", "| Check | Pass | Fail | Skip |", "|-------|------|------|------|"])
    for check_id, counts in result.check_counts().items():
        lines.append(
            f"| {check_id} | {counts[STATUS_PASS]} | {counts[STATUS_FAIL]} | {counts[STATUS_SKIP]} |"
        )
    lines.append("")

    lines.extend(["## Checks Performed", ""])
    for index, title in enumerate(titles.values(), 1):
        lines.append(f"{index}. {title}")
    lines.append("")
    return "\n".join(lines)
