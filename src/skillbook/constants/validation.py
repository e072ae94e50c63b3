"""Stable validation error codes and allowed-key sets for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # value out of range
CFG008: str = "CFG008"  # invalid nested mapping
CFG009: str = "CFG009"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "skill_globs",
        "max_file_mb",
        "agents_dir",
        "pipeline_dir",
        "utility_skills",
        "core_agents",
        "fail_on",
        "checks",
        "categories",
    }
)

ALLOWED_CHECKS_KEYS: frozenset[str] = frozenset({"disabled"})
ALLOWED_CATEGORY_KEYS: frozenset[str] = frozenset(
    {"patterns", "min_lines", "min_sources", "min_code_blocks", "required_sections"}
)
CATEGORY_INT_KEYS: tuple[str, ...] = ("min_lines", "min_sources", "min_code_blocks")
CATEGORY_LIST_KEYS: tuple[str, ...] = ("patterns", "required_sections")

LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("skill_globs", "utility_skills", "core_agents")
STRING_KEYS: tuple[str, ...] = ("agents_dir", "pipeline_dir")
