"""Core entities: parsed documents, agents, catalog entries and lint results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillbook.constants.checks import SEVERITY_RANK, STATUS_FAIL, STATUS_PASS, STATUS_SKIP
from skillbook.constants.config import UTILITY_CATEGORY
from skillbook.types import CheckStatus, JsonObject, Severity


@dataclass(frozen=True)
class Heading:
    """A Markdown ATX heading found outside code blocks."""

    level: int
    text: str
    line: int
    anchor: str


@dataclass(frozen=True)
class Link:
    """An inline Markdown link target found outside code blocks."""

    target: str
    line: int


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block; ``end_line`` is None when the fence never closes."""

    fence: str
    language: str
    start_line: int
    end_line: int | None

    @property
    def closed(self) -> bool:
        return self.end_line is not None


@dataclass(frozen=True)
class ParsedSkillDocument:
    """A SKILL.md file split into frontmatter and verbatim body."""

    file_path: Path
    raw_text: str
    frontmatter: dict[str, Any] | None
    body: str
    body_start_line: int
    line_count: int
    headings: tuple[Heading, ...] = ()
    links: tuple[Link, ...] = ()
    code_blocks: tuple[CodeBlock, ...] = ()
    url_line_count: int = 0

    def frontmatter_string(self, key: str) -> str | None:
        """Return a stripped, non-empty string frontmatter value or None."""
        if not isinstance(self.frontmatter, dict):
            return None
        value = self.frontmatter.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    @property
    def declared_name(self) -> str | None:
        return self.frontmatter_string("name")

    @property
    def description(self) -> str | None:
        return self.frontmatter_string("description")

    @property
    def closed_code_blocks(self) -> int:
        return sum(1 for block in self.code_blocks if block.closed)


@dataclass(frozen=True)
class AgentDefinition:
    """An agent Markdown file and the skills its frontmatter lists."""

    name: str
    path: Path
    description: str = ""
    skills: tuple[str, ...] = ()


@dataclass(frozen=True)
class Skill:
    """A catalog entry for one loaded skill document."""

    name: str
    description: str
    path: Path
    category: str
    document: ParsedSkillDocument

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def directory_name(self) -> str:
        return self.path.parent.name

    @property
    def body(self) -> str:
        return self.document.body


@dataclass(frozen=True)
class Evidence:
    """Where a check result points in the corpus."""

    path: str
    line: int | None = None


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check against one skill or the whole corpus."""

    check_id: str
    status: CheckStatus
    severity: Severity
    message: str = ""
    evidence: Evidence | None = None
    details: tuple[str, ...] = ()

    @property
    def failed(self) -> bool:
        return self.status == STATUS_FAIL

    def to_dict(self) -> JsonObject:
        payload: JsonObject = {
            "check_id": self.check_id,
            "status": self.status,
            "severity": self.severity,
            "message": self.message,
            "details": list(self.details),
        }
        if self.evidence is not None:
            payload["evidence"] = {"path": self.evidence.path, "line": self.evidence.line}
        return payload


@dataclass(frozen=True)
class SkillReport:
    """All check results for one skill."""

    skill: str
    category: str
    path: str
    results: tuple[CheckResult, ...]

    def failures(self, fail_on: Severity = "warning") -> tuple[CheckResult, ...]:
        """Return failed results whose severity reaches ``fail_on``."""
        threshold = SEVERITY_RANK[fail_on]
        return tuple(
            result for result in self.results if result.failed and SEVERITY_RANK[result.severity] >= threshold
        )

    def passed(self, fail_on: Severity = "error") -> bool:
        return not self.failures(fail_on)

    def to_dict(self, fail_on: Severity = "error") -> JsonObject:
        return {
            "skill": self.skill,
            "category": self.category,
            "path": self.path,
            "passed": self.passed(fail_on),
            "results": [result.to_dict() for result in self.results],
        }


@dataclass(frozen=True)
class LintResult:
    """Aggregate lint outcome across the selected skills."""

    root: Path
    fail_on: Severity
    reports: tuple[SkillReport, ...]
    corpus_results: tuple[CheckResult, ...]
    duration_seconds: float = 0.0
    warnings: tuple[str, ...] = ()
    filter_description: str = "All skills"
    category_counts: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.reports)

    @property
    def passed_count(self) -> int:
        return sum(1 for report in self.reports if report.passed(self.fail_on))

    @property
    def failed_count(self) -> int:
        return self.total - self.passed_count

    @property
    def utility_count(self) -> int:
        return sum(1 for report in self.reports if report.category == UTILITY_CATEGORY)

    @property
    def failed_reports(self) -> tuple[SkillReport, ...]:
        return tuple(report for report in self.reports if not report.passed(self.fail_on))

    def corpus_failures(self) -> tuple[CheckResult, ...]:
        threshold = SEVERITY_RANK[self.fail_on]
        return tuple(
            result
            for result in self.corpus_results
            if result.failed and SEVERITY_RANK[result.severity] >= threshold
        )

    def check_counts(self) -> dict[str, dict[str, int]]:
        """Return ``{check_id: {status: count}}`` across skill and corpus results."""
        counts: dict[str, dict[str, int]] = {}
        for report in self.reports:
            for result in report.results:
                bucket = counts.setdefault(result.check_id, {STATUS_PASS: 0, STATUS_FAIL: 0, STATUS_SKIP: 0})
                bucket[result.status] += 1
        for result in self.corpus_results:
            bucket = counts.setdefault(result.check_id, {STATUS_PASS: 0, STATUS_FAIL: 0, STATUS_SKIP: 0})
            bucket[result.status] += 1
        return {check_id: counts[check_id] for check_id in sorted(counts)}
