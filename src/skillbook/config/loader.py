"""Config loading and normalization for Skillbook workspaces."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skillbook.config.model import SkillbookConfig, build_category, default_categories, is_relative_glob
from skillbook.constants.checks import ALL_CHECK_IDS, VALID_SEVERITIES
from skillbook.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_AGENTS_DIR,
    DEFAULT_CATEGORIES,
    DEFAULT_FAIL_ON,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_PIPELINE_DIR,
    DEFAULT_SKILL_GLOBS,
    DEFAULT_CORE_AGENTS,
    DEFAULT_UTILITY_SKILLS,
    UNKNOWN_CATEGORY,
)
from skillbook.constants.validation import ALLOWED_CATEGORY_KEYS, CATEGORY_INT_KEYS, CATEGORY_LIST_KEYS
from skillbook.exceptions import ConfigError
from skillbook.types import CategoryConfig, ChecksConfig

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> SkillbookConfig:
    """Load and validate workspace config from ``skillbook.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No %s in %s; using defaults", CONFIG_FILENAME, root)
        return SkillbookConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    max_file_mb = raw.get("max_file_mb", DEFAULT_MAX_FILE_MB)
    if isinstance(max_file_mb, bool) or not isinstance(max_file_mb, int) or max_file_mb <= 0:
        raise ConfigError("max_file_mb must be a positive integer")

    fail_on = raw.get("fail_on", DEFAULT_FAIL_ON)
    if not isinstance(fail_on, str) or fail_on not in VALID_SEVERITIES:
        raise ConfigError(f"fail_on must be one of {sorted(VALID_SEVERITIES)}, got {fail_on!r}")

    checks_raw = raw.get("checks", {})
    if checks_raw is None:
        checks_raw = {}
    if not isinstance(checks_raw, dict):
        raise ConfigError("checks must be a mapping")
    disabled = tuple(_ensure_string_list(checks_raw.get("disabled", []), "checks.disabled"))
    unknown_checks = sorted(set(disabled) - ALL_CHECK_IDS)
    if unknown_checks:
        raise ConfigError(f"checks.disabled contains unknown check id(s): {', '.join(unknown_checks)}")

    skill_globs = tuple(_ensure_string_list(raw.get("skill_globs", list(DEFAULT_SKILL_GLOBS)), "skill_globs"))
    if not skill_globs:
        raise ConfigError("skill_globs must contain at least one pattern")
    escaping = [pattern for pattern in skill_globs if not is_relative_glob(pattern)]
    if escaping:
        raise ConfigError(f"skill_globs must be relative to the workspace root: {', '.join(escaping)}")

    return SkillbookConfig(
        skill_globs=skill_globs,
        max_file_mb=max_file_mb,
        agents_dir=_ensure_string(raw.get("agents_dir", DEFAULT_AGENTS_DIR), "agents_dir"),
        pipeline_dir=_ensure_string(raw.get("pipeline_dir", DEFAULT_PIPELINE_DIR), "pipeline_dir"),
        utility_skills=tuple(
            _ensure_string_list(raw.get("utility_skills", list(DEFAULT_UTILITY_SKILLS)), "utility_skills")
        ),
        core_agents=tuple(_ensure_string_list(raw.get("core_agents", list(DEFAULT_CORE_AGENTS)), "core_agents")),
        fail_on=fail_on,  # type: ignore[arg-type]
        checks=ChecksConfig(disabled=disabled),
        categories=_build_categories(raw.get("categories")),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item.strip() for item in value if item.strip()]


def _ensure_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _build_categories(raw: Any) -> tuple[CategoryConfig, ...]:
    """Merge configured categories over the defaults.

    Known names are merged field by field and keep their position; new
    names are appended after the defaults.
    """
    if raw is None:
        return default_categories()
    if not isinstance(raw, dict):
        raise ConfigError("categories must be a mapping of category name to settings")

    merged: dict[str, dict[str, Any]] = {name: dict(values) for name, values in DEFAULT_CATEGORIES.items()}
    for name, settings in raw.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigError("category names must be non-empty strings")
        if name == UNKNOWN_CATEGORY:
            raise ConfigError(f"`{UNKNOWN_CATEGORY}` is reserved for skills matching no category")
        if settings is None:
            settings = {}
        if not isinstance(settings, dict):
            raise ConfigError(f"categories.{name} must be a mapping")
        unknown_keys = sorted(set(settings) - ALLOWED_CATEGORY_KEYS)
        if unknown_keys:
            raise ConfigError(f"categories.{name} has unknown key(s): {', '.join(map(str, unknown_keys))}")

        entry = merged.setdefault(name, {})
        for key in CATEGORY_INT_KEYS:
            if key in settings:
                value = settings[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                    raise ConfigError(f"categories.{name}.{key} must be a non-negative integer")
                entry[key] = value
        for key in CATEGORY_LIST_KEYS:
            if key in settings:
                entry[key] = _ensure_string_list(settings[key], f"categories.{name}.{key}")

    return tuple(build_category(name, values) for name, values in merged.items())
