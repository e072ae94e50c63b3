"""End-to-end lint orchestration for a skill workspace."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from pathlib import Path

from skillbook.agents import load_agents, load_pipeline_configs
from skillbook.catalog import SkillCatalog
from skillbook.catalog.discovery import stable_path_key
from skillbook.checks import Check, LintContext, build_corpus_checks, build_document_checks
from skillbook.config import SkillbookConfig, load_config
from skillbook.constants.checks import (
    FRONTMATTER,
    SKILL_FILE,
    STATUS_FAIL,
    UTILITY_CHECK_IDS,
)
from skillbook.constants.config import UTILITY_CATEGORY
from skillbook.constants.discovery import PIPELINE_AGENTS_DIRNAME, SKILL_MARKDOWN_FILENAME, SKILLS_DIRNAME
from skillbook.constants.reporting import VALID_OUTPUT_FORMATS
from skillbook.exceptions import ConfigError
from skillbook.model import CheckResult, Evidence, LintResult, Skill, SkillReport
from skillbook.reporting import write_lint_reports
from skillbook.types import Severity

logger = logging.getLogger(__name__)


def lint_workspace(
    *,
    root: Path,
    config_path: Path | None = None,
    skills: tuple[str, ...] | None = None,
    category: str | None = None,
    out: Path | None = None,
    output_formats: tuple[str, ...] = ("json",),
    fail_on: Severity | None = None,
) -> LintResult:
    """Lint the skills in a workspace and optionally write report files."""
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        raise ConfigError(
            f"Unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )

    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Workspace root does not exist or is not a directory: {root}")

    config = load_config(root, config_path)
    if fail_on is not None:
        config = replace(config, fail_on=fail_on)
    if category is not None and config.category_named(category) is None:
        raise ConfigError(f"Unknown category '{category}'. Known categories: {', '.join(config.category_names)}")

    catalog = SkillCatalog.load(root, config)
    warnings = list(catalog.warnings)
    context = build_context(root, config, catalog, warnings)

    document_checks = build_document_checks(config)
    reports: list[SkillReport] = []

    if skills:
        by_directory = catalog.by_directory()
        for name in skills:
            skill = catalog.get(name) if name in catalog else by_directory.get(name)
            if skill is None:
                missing = _missing_skill_report(root, name, catalog, config)
                if missing.results[0].check_id == SKILL_FILE:
                    warning = f"Skill '{name}' not found under {SKILLS_DIRNAME}/"
                    warnings.append(warning)
                    logger.warning(warning)
                reports.append(missing)
                continue
            reports.append(_lint_skill(skill, context, document_checks))
        filter_description = f"Skills: {', '.join(skills)}"
    else:
        for skill in catalog.entries:
            if category is not None and skill.category != category:
                continue
            reports.append(_lint_skill(skill, context, document_checks))
        for path, error in sorted(catalog.parse_errors.items()):
            skill_category = config.categorize(path.parent.name).name
            if category is not None and skill_category != category:
                continue
            reports.append(_unparseable_skill_report(root, path, error, skill_category))
        reports.sort(key=lambda report: (report.skill, report.path))
        filter_description = f"Category: {category}" if category else "All skills"

    corpus_results = tuple(check.run(context=context) for check in build_corpus_checks(config))

    category_counts: dict[str, int] = {}
    for report in reports:
        category_counts[report.category] = category_counts.get(report.category, 0) + 1

    result = LintResult(
        root=root,
        fail_on=config.fail_on,
        reports=tuple(reports),
        corpus_results=corpus_results,
        duration_seconds=time.perf_counter() - started_at,
        warnings=tuple(warnings),
        filter_description=filter_description,
        category_counts=dict(sorted(category_counts.items())),
    )

    if out is not None:
        write_lint_reports(out.resolve(), result, output_formats)

    logger.debug("Linted %d skills in %.3fs", result.total, result.duration_seconds)
    return result


def build_context(
    root: Path,
    config: SkillbookConfig,
    catalog: SkillCatalog,
    warnings: list[str],
) -> LintContext:
    """Load agents and pipeline configs that the workspace checks need."""
    agents_dir = config.agents_path(root)
    agents, agent_warnings = load_agents(agents_dir)
    warnings.extend(agent_warnings)

    pipeline_dir = config.pipeline_path(root)
    pipeline_configs, pipeline_warnings = load_pipeline_configs(pipeline_dir)
    warnings.extend(pipeline_warnings)

    return LintContext(
        root=root,
        config=config,
        catalog=catalog,
        agents=agents if agents_dir.is_dir() else None,
        pipeline_configs=pipeline_configs if (pipeline_dir / PIPELINE_AGENTS_DIRNAME).is_dir() else None,
    )


def evaluate_exit_code(result: LintResult) -> int:
    """Return 1 if any skill or workspace check fails at or above ``fail_on``, else 0."""
    if result.failed_count or result.corpus_failures():
        return 1
    return 0


def _lint_skill(skill: Skill, context: LintContext, checks: list[Check]) -> SkillReport:
    category = context.config.categorize(skill.directory_name)
    is_utility = category.name == UTILITY_CATEGORY
    results: list[CheckResult] = []
    for check in checks:
        if is_utility and check.check_id not in UTILITY_CHECK_IDS:
            results.append(check.skipped("utility skill"))
            continue
        results.append(check.run(skill=skill, category=category, context=context))
    return SkillReport(
        skill=skill.name,
        category=category.name,
        path=stable_path_key(skill.path, context.root),
        results=tuple(results),
    )


def _unparseable_skill_report(root: Path, path: Path, error: str, category: str) -> SkillReport:
    return SkillReport(
        skill=path.parent.name,
        category=category,
        path=stable_path_key(path, root),
        results=(
            CheckResult(
                check_id=FRONTMATTER,
                status=STATUS_FAIL,
                severity="error",
                message=error,
                evidence=Evidence(path=str(path), line=1),
            ),
        ),
    )


def _missing_skill_report(root: Path, name: str, catalog: SkillCatalog, config: SkillbookConfig) -> SkillReport:
    path = root / SKILLS_DIRNAME / name / SKILL_MARKDOWN_FILENAME
    parse_error = catalog.parse_errors.get(path.resolve()) if path.exists() else None
    if parse_error is not None:
        return _unparseable_skill_report(root, path.resolve(), parse_error, config.categorize(name).name)
    return SkillReport(
        skill=name,
        category=config.categorize(name).name,
        path=stable_path_key(path, root),
        results=(
            CheckResult(
                check_id=SKILL_FILE,
                status=STATUS_FAIL,
                severity="error",
                message=f"{SKILL_MARKDOWN_FILENAME} not found",
                evidence=Evidence(path=str(path)),
            ),
        ),
    )

