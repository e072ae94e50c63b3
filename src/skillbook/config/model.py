"""Config data model for Skillbook workspaces."""

from __future__ import annotations

from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath, PureWindowsPath

from skillbook.constants.config import (
    DEFAULT_AGENTS_DIR,
    DEFAULT_CATEGORIES,
    DEFAULT_CORE_AGENTS,
    DEFAULT_FAIL_ON,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_PIPELINE_DIR,
    DEFAULT_SKILL_GLOBS,
    DEFAULT_UTILITY_SKILLS,
    UNKNOWN_CATEGORY,
    UNKNOWN_CATEGORY_THRESHOLDS,
)
from skillbook.types import CategoryConfig, ChecksConfig, Severity


def build_category(name: str, raw: dict[str, object]) -> CategoryConfig:
    """Build a CategoryConfig from an already-validated mapping."""
    return CategoryConfig(
        name=name,
        patterns=tuple(raw.get("patterns", ()) or ()),  # type: ignore[arg-type]
        min_lines=int(raw.get("min_lines", 0)),  # type: ignore[call-overload]
        min_sources=int(raw.get("min_sources", 0)),  # type: ignore[call-overload]
        min_code_blocks=int(raw.get("min_code_blocks", 0)),  # type: ignore[call-overload]
        required_sections=tuple(raw.get("required_sections", ()) or ()),  # type: ignore[arg-type]
    )


def is_relative_glob(pattern: str) -> bool:
    """Return True when ``pattern`` stays inside the workspace root."""
    if PurePosixPath(pattern).is_absolute() or PureWindowsPath(pattern).is_absolute():
        return False
    return ".." not in PurePosixPath(pattern.replace("\\", "/")).parts


def default_categories() -> tuple[CategoryConfig, ...]:
    return tuple(build_category(name, raw) for name, raw in DEFAULT_CATEGORIES.items())


UNKNOWN_CATEGORY_CONFIG: CategoryConfig = build_category(UNKNOWN_CATEGORY, UNKNOWN_CATEGORY_THRESHOLDS)


@dataclass(frozen=True)
class SkillbookConfig:
    """Resolved workspace config."""

    skill_globs: tuple[str, ...] = DEFAULT_SKILL_GLOBS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    agents_dir: str = DEFAULT_AGENTS_DIR
    pipeline_dir: str = DEFAULT_PIPELINE_DIR
    utility_skills: tuple[str, ...] = DEFAULT_UTILITY_SKILLS
    core_agents: tuple[str, ...] = DEFAULT_CORE_AGENTS
    fail_on: Severity = DEFAULT_FAIL_ON  # type: ignore[assignment]
    checks: ChecksConfig = ChecksConfig()
    categories: tuple[CategoryConfig, ...] = field(default_factory=default_categories)

    def categorize(self, directory_name: str) -> CategoryConfig:
        """Return the first category whose pattern matches a skill directory name."""
        for category in self.categories:
            if any(fnmatchcase(directory_name, pattern) for pattern in category.patterns):
                return category
        return UNKNOWN_CATEGORY_CONFIG

    def category_named(self, name: str) -> CategoryConfig | None:
        if name == UNKNOWN_CATEGORY:
            return UNKNOWN_CATEGORY_CONFIG
        return next((category for category in self.categories if category.name == name), None)

    @property
    def category_names(self) -> tuple[str, ...]:
        return (*(category.name for category in self.categories), UNKNOWN_CATEGORY)

    def check_enabled(self, check_id: str) -> bool:
        return check_id not in self.checks.disabled

    def agents_path(self, root: Path) -> Path:
        return root / self.agents_dir

    def pipeline_path(self, root: Path) -> Path:
        return root / self.pipeline_dir
