"""Per-document checks: the frontmatter contract and structural quality rules."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import unquote

from skillbook.checks.base import Check
from skillbook.checks.context import LintContext
from skillbook.constants import checks as ids
from skillbook.constants.checks import LINK_IGNORED_SCHEMES, SOURCES_HEADING_KEYWORDS
from skillbook.model import CheckResult, Evidence, Link, ParsedSkillDocument, Skill
from skillbook.types import CategoryConfig


def _evidence(document: ParsedSkillDocument, line: int | None = None) -> Evidence:
    return Evidence(path=str(document.file_path), line=line)


def _frontmatter_key_line(document: ParsedSkillDocument, key: str) -> int | None:
    lines = document.raw_text.lstrip("\ufeff").splitlines()
    for index in range(1, max(document.body_start_line - 2, 1)):
        if lines[index].startswith(f"{key}:"):
            return index + 1
    return None


def _has_heading(document: ParsedSkillDocument, needle: str) -> bool:
    lowered = needle.lower()
    return any(lowered in heading.text.lower() for heading in document.headings)


class FrontmatterCheck(Check):
    """Frontmatter block exists with non-empty `name` and `description`."""

    check_id = ids.FRONTMATTER
    severity = "error"
    title = "Valid YAML frontmatter (has `---` block with `name` and `description` fields)"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        document = skill.document
        if document.frontmatter is None:
            return self.failed("missing or empty frontmatter block", evidence=_evidence(document, 1))

        missing = [key for key in ("name", "description") if document.frontmatter_string(key) is None]
        if missing:
            return self.failed(
                f"frontmatter lacks non-empty {', '.join(f'`{key}`' for key in missing)}",
                evidence=_evidence(document, 1),
            )
        return self.passed()


class NameMatchCheck(Check):
    """Declared `name` equals the skill's folder name."""

    check_id = ids.NAME_MATCH
    severity = "error"
    title = "Frontmatter `name` matches the skill directory name"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        declared = skill.document.declared_name
        if declared is None:
            return self.skipped("no declared name")
        if declared != skill.directory_name:
            return self.failed(
                f"name `{declared}` does not match directory `{skill.directory_name}`",
                evidence=_evidence(skill.document, _frontmatter_key_line(skill.document, "name")),
            )
        return self.passed()


class CodeFencesCheck(Check):
    check_id = ids.CODE_FENCES
    severity = "error"
    title = "Every fenced code block is closed"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        unclosed = [block for block in skill.document.code_blocks if not block.closed]
        if not unclosed:
            return self.passed(f"{len(skill.document.code_blocks)} fenced blocks")
        first = unclosed[0]
        return self.failed(
            f"code fence `{first.fence}` opened on line {first.start_line} is never closed",
            evidence=_evidence(skill.document, first.start_line),
        )


class LocalLinksCheck(Check):
    """Relative links point at files that exist and anchors at real headings."""

    check_id = ids.LOCAL_LINKS
    severity = "error"
    title = "Relative links and `#anchor` links resolve"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        document = skill.document
        anchors = {heading.anchor for heading in document.headings}
        broken: list[Link] = []
        checked = 0

        for link in document.links:
            target = link.target
            if target.lower().startswith(LINK_IGNORED_SCHEMES) or target.startswith("//"):
                continue
            checked += 1
            path_part, _, anchor = target.partition("#")
            if not path_part:
                if anchor.lower() not in anchors:
                    broken.append(link)
                continue
            if not self._resolve(path_part, skill.directory, context.root).exists():
                broken.append(link)

        if not broken:
            return self.passed(f"{checked} local links")
        return self.failed(
            f"{len(broken)} broken local link(s)",
            evidence=_evidence(document, broken[0].line),
            details=tuple(f"line {link.line}: {link.target}" for link in broken),
        )

    @staticmethod
    def _resolve(path_part: str, skill_dir: Path, root: Path) -> Path:
        decoded = unquote(path_part)
        if decoded.startswith("/"):
            return root / decoded.lstrip("/")
        return skill_dir / decoded


class LineCountCheck(Check):
    check_id = ids.LINE_COUNT
    severity = "warning"
    title = "Minimum line count for the skill's category"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        count = skill.document.line_count
        if count >= category.min_lines:
            return self.passed(f"{count} lines")
        return self.failed(f"{count} lines, need >= {category.min_lines}", evidence=_evidence(skill.document))


class SourcesSectionCheck(Check):
    check_id = ids.SOURCES_SECTION
    severity = "warning"
    title = "Sources & References section exists"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        if any(_has_heading(skill.document, keyword) for keyword in SOURCES_HEADING_KEYWORDS):
            return self.passed()
        return self.failed("no heading mentions sources or references", evidence=_evidence(skill.document))


class SourceUrlsCheck(Check):
    """Counts lines carrying an http(s) URL, not distinct URLs."""

    check_id = ids.SOURCE_URLS
    severity = "warning"
    title = "Minimum source URLs for the skill's category"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        count = skill.document.url_line_count
        if count >= category.min_sources:
            return self.passed(f"{count} URLs")
        return self.failed(f"{count} URLs, need >= {category.min_sources}", evidence=_evidence(skill.document))


class CodeBlocksCheck(Check):
    check_id = ids.CODE_BLOCKS
    severity = "warning"
    title = "Minimum code examples for the skill's category"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        count = skill.document.closed_code_blocks
        if count >= category.min_code_blocks:
            return self.passed(f"{count} code blocks")
        return self.failed(
            f"{count} code blocks, need >= {category.min_code_blocks}",
            evidence=_evidence(skill.document),
        )


class RequiredSectionsCheck(Check):
    check_id = ids.REQUIRED_SECTIONS
    severity = "warning"
    title = "Required sections exist per category"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        if not category.required_sections:
            return self.skipped(f"no required sections for category {category.name}")
        missing = tuple(section for section in category.required_sections if not _has_heading(skill.document, section))
        if not missing:
            return self.passed()
        return self.failed(
            f"missing section(s): {', '.join(missing)}",
            evidence=_evidence(skill.document),
            details=tuple(f"Missing section: {section}" for section in missing),
        )


class AgentReferenceCheck(Check):
    """The skill is listed in at least one agent's `skills`."""

    check_id = ids.AGENT_REFERENCE
    severity = "warning"
    title = "Skill is referenced by at least one agent"

    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        if context.agents is None:
            return self.skipped("no agents directory")
        referenced = context.referenced_skills()
        if skill.directory_name in referenced or skill.name in referenced:
            return self.passed()
        return self.failed("not referenced by any agent", evidence=_evidence(skill.document))


DOCUMENT_CHECKS: tuple[type[Check], ...] = (
    FrontmatterCheck,
    NameMatchCheck,
    CodeFencesCheck,
    LocalLinksCheck,
    LineCountCheck,
    SourcesSectionCheck,
    SourceUrlsCheck,
    CodeBlocksCheck,
    RequiredSectionsCheck,
    AgentReferenceCheck,
)
