"""Human-readable stdout reporter for lint results."""

from __future__ import annotations

from skillbook.constants.branding import ASCII_LOGO_LINES, LINT_SUMMARY_TITLE
from skillbook.constants.checks import STATUS_FAIL, STATUS_PASS, STATUS_SKIP
from skillbook.constants.reporting import ANSI_DIM, ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW, STATUS_COLORS
from skillbook.model import CheckResult, LintResult, SkillReport


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class StdoutReporter:
    """Formats lint results as terminal output, one block per skill."""

    def __init__(
        self,
        result: LintResult,
        *,
        color: bool = True,
        verbose: bool = False,
        failures_only: bool = False,
    ) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose
        self._failures_only = failures_only

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header(), self._render_skills(), self._render_corpus(), self._render_summary()]
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {LINT_SUMMARY_TITLE}",
            "  " + "─" * 38,
            "",
            f"  Root        {r.root}",
            f"  Filter      {r.filter_description}",
            f"  Fail on     {r.fail_on}",
            "",
        ]
        return "\n".join(lines)

    def _render_skills(self) -> str:
        lines: list[str] = []
        for report in self._result.reports:
            passed = report.passed(self._result.fail_on)
            if self._failures_only and passed:
                continue
            lines.extend(self._render_report(report, passed))
        return "\n".join(lines)

    def _render_report(self, report: SkillReport, passed: bool) -> list[str]:
        verdict = self._status_label(STATUS_PASS if passed else STATUS_FAIL)
        lines = [f"  {verdict}  {report.skill} ({report.category})"]
        for result in report.results:
            if result.status == STATUS_PASS and not self._verbose:
                continue
            lines.append(self._render_result(result))
        lines.append("")
        return lines

    def _render_corpus(self) -> str:
        if not self._result.corpus_results:
            return ""
        lines = ["  Global checks"]
        for result in self._result.corpus_results:
            lines.append(self._render_result(result))
            if result.failed:
                lines.extend(f"        {detail}" for detail in result.details)
        lines.append("")
        return "\n".join(lines)

    def _render_result(self, result: CheckResult) -> str:
        label = self._status_label(result.status)
        severity = f" [{result.severity}]" if result.status == STATUS_FAIL else ""
        location = ""
        if result.failed and result.evidence is not None and result.evidence.line is not None:
            location = f" (line {result.evidence.line})"
        message = f": {result.message}" if result.message else ""
        return f"    {label}  {result.check_id}{severity}{message}{location}"

    def _render_summary(self) -> str:
        r = self._result
        failed = str(r.failed_count)
        if self._color:
            failed = _colorize(failed, ANSI_RED if r.failed_count else ANSI_GREEN)
        lines = [
            "  Summary",
            f"  Tested      {r.total}",
            f"  Passed      {r.passed_count}",
            f"  Failed      {failed}",
            f"  Utility     {r.utility_count}",
        ]
        if r.category_counts:
            breakdown = " · ".join(f"{name} {count}" for name, count in r.category_counts.items())
            lines.append(f"  Categories  {breakdown}")
        corpus_failures = r.corpus_failures()
        if corpus_failures:
            lines.append(f"  Global      {len(corpus_failures)} failing")
        for warning in r.warnings:
            text = f"warning: {warning}"
            lines.append(f"  {_colorize(text, ANSI_YELLOW) if self._color else text}")
        if self._verbose:
            duration = f"{r.duration_seconds:.3f}s"
            lines.append(f"  Duration    {_colorize(duration, ANSI_DIM) if self._color else duration}")
        lines.append("")
        return "\n".join(lines)

    def _status_label(self, status: str) -> str:
        text = {STATUS_PASS: "PASS", STATUS_FAIL: "FAIL", STATUS_SKIP: "SKIP"}.get(status, status.upper())
        if not self._color:
            return text
        return _colorize(text, STATUS_COLORS.get(status, ""))
