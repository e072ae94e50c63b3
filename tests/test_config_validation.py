"""Tests for collect-all config validation (error codes, messages, ordering)."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillbook.config import validate_config_file
from skillbook.config.validator import _suggest_key
from skillbook.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
)
from skillbook.exceptions.validation import ValidationError, format_errors, sort_errors
from skillbook.validation import preflight_validate


def _write_config(root: Path, content: str) -> Path:
    config_path = root / "skillbook.yaml"
    config_path.write_text(content, encoding="utf-8")
    return config_path


def _codes(errors: list[ValidationError]) -> list[str]:
    return [error.code for error in errors]


def test_missing_default_config_is_valid(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config_reports_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "absent.yaml", config_explicit=True)

    assert _codes(errors) == [CFG001]


def test_invalid_yaml_reports_location(tmp_path: Path) -> None:
    _write_config(tmp_path, "fail_on: error\nskill_globs: [unclosed\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG002]
    assert errors[0].line is not None
    assert errors[0].column is not None


def test_non_mapping_reports_cfg003(tmp_path: Path) -> None:
    _write_config(tmp_path, "- just\n- a list\n")

    assert _codes(validate_config_file(tmp_path)) == [CFG003]


def test_unknown_key_includes_suggestion(tmp_path: Path) -> None:
    _write_config(tmp_path, "skil_globs: ['skills/*/SKILL.md']\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG004]
    assert errors[0].key == "skil_globs"
    assert "skill_globs" in errors[0].suggestion


def test_collects_every_problem(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "\n".join(
            [
                "max_file_mb: 0",
                "fail_on: fatal",
                "utility_skills: review",
                "agents_dir: ''",
                "skill_globs: []",
                "",
            ]
        ),
    )

    errors = sort_errors(validate_config_file(tmp_path))

    assert sorted(_codes(errors)) == [CFG005, CFG005, CFG006, CFG007, CFG007]
    keys = {(error.code, error.key) for error in errors}
    assert (CFG007, "max_file_mb") in keys
    assert (CFG006, "fail_on") in keys
    assert (CFG005, "utility_skills") in keys
    assert (CFG005, "agents_dir") in keys
    assert (CFG007, "skill_globs") in keys


def test_checks_block_validation(tmp_path: Path) -> None:
    _write_config(tmp_path, "checks:\n  disabled: [LINE_CONT]\n  enabled: []\n")

    errors = sort_errors(validate_config_file(tmp_path))

    assert [(error.code, error.key) for error in errors] == [
        (CFG006, "checks.disabled"),
        (CFG004, "checks.enabled"),
    ]
    assert "LINE_COUNT" in errors[0].suggestion


def test_checks_block_must_be_mapping(tmp_path: Path) -> None:
    _write_config(tmp_path, "checks: [LINE_COUNT]\n")

    assert _codes(validate_config_file(tmp_path)) == [CFG008]


def test_categories_block_validation(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "\n".join(
            [
                "categories:",
                "  unknown: {}",
                "  dev:",
                "    min_lines: many",
                "    min_sources: -2",
                "    patterns: rails-*",
                "    colour: blue",
                "  qa: [a, b]",
                "",
            ]
        ),
    )

    errors = sort_errors(validate_config_file(tmp_path))

    assert [(error.code, error.key) for error in errors] == [
        (CFG004, "categories.dev.colour"),
        (CFG005, "categories.dev.min_lines"),
        (CFG007, "categories.dev.min_sources"),
        (CFG005, "categories.dev.patterns"),
        (CFG008, "categories.qa"),
        (CFG006, "categories.unknown"),
    ]


def test_valid_full_config_has_no_errors(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "\n".join(
            [
                "skill_globs: ['skills/*/SKILL.md']",
                "max_file_mb: 3",
                "agents_dir: agents",
                "pipeline_dir: pipeline",
                "utility_skills: [pipeline, review]",
                "fail_on: warning",
                "checks:",
                "  disabled: [AGENT_REFERENCE, PIPELINE_SYNC]",
                "categories:",
                "  planning:",
                "    min_lines: 150",
                "    required_sections: ['Sources & References']",
                "",
            ]
        ),
    )

    assert validate_config_file(tmp_path) == []


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "does-not-exist")

    assert _codes(errors) == [CFG009]


def test_preflight_uses_explicit_config_flag(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path, tmp_path / "missing.yaml")

    assert _codes(errors) == [CFG001]


def test_format_errors_groups_by_file_and_addresses_keys() -> None:
    errors = [
        ValidationError(code=CFG006, path="b.yaml", key="fail_on", message="bad value", suggestion="use error"),
        ValidationError(code=CFG002, path="a.yaml", key="", message="invalid YAML", line=3, column=7),
        ValidationError(code=CFG004, path="b.yaml", key="checks.enable", message="unknown key"),
        ValidationError(code=CFG001, path="c.yaml", key="", message="config file not found"),
    ]

    assert format_errors(errors).splitlines() == [
        "a.yaml:",
        "  CFG002 3:7: invalid YAML",
        "b.yaml:",
        "  CFG004 checks.enable: unknown key",
        "  CFG006 fail_on: bad value; use error",
        "c.yaml:",
        "  CFG001 config file not found",
    ]


def test_location_prefers_key_over_line() -> None:
    error = ValidationError(code=CFG005, path="a.yaml", key="max_file_mb", message="bad", line=2, column=1)

    assert error.location == "max_file_mb"
    assert ValidationError(code=CFG002, path="a.yaml", key="", message="bad", line=2).location == "2"


def test_skill_globs_outside_root_report_cfg007(tmp_path: Path) -> None:
    _write_config(tmp_path, "skill_globs: ['/abs/skills/*/SKILL.md', '../x/*/SKILL.md', 'skills/*/SKILL.md']\n")

    errors = validate_config_file(tmp_path)

    assert [(error.code, error.key) for error in errors] == [(CFG007, "skill_globs"), (CFG007, "skill_globs")]
    assert "/abs/skills/*/SKILL.md" in errors[0].message
    assert "../x/*/SKILL.md" in errors[1].message

    assert format_errors(errors).splitlines() == [
        "[CFG002] a.yaml:3:7 invalid YAML",
        "[CFG006] b.yaml bad value (use error)",
    ]


@pytest.mark.parametrize(
    ("unknown", "expected"),
    [
        ("fail-on", "did you mean `fail_on`?"),
        ("max_file_size", "did you mean `max_file_mb`?"),
        ("zzzz", ""),
    ],
)
def test_suggest_key(unknown: str, expected: str) -> None:
    assert _suggest_key(unknown, ALLOWED_CONFIG_KEYS) == expected
