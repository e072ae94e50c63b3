"""Config file validation for Skillbook workspaces."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from skillbook.config.model import is_relative_glob
from skillbook.constants.checks import ALL_CHECK_IDS, VALID_SEVERITIES
from skillbook.constants.config import CONFIG_FILENAME, UNKNOWN_CATEGORY
from skillbook.constants.validation import (
    ALLOWED_CATEGORY_KEYS,
    ALLOWED_CHECKS_KEYS,
    ALLOWED_CONFIG_KEYS,
    CATEGORY_INT_KEYS,
    CATEGORY_LIST_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    LIST_OF_STRINGS_KEYS,
    STRING_KEYS,
)
from skillbook.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skillbook.yaml file and return all validation errors.

    This is the collect-all entry point used by ``skillbook validate-config``
    and the preflight of ``skillbook lint``. It never raises; all problems are
    returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    key="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                key="",
                message=f"invalid YAML: {exc}",
                line=(mark.line + 1) if mark is not None else None,
                column=(mark.column + 1) if mark is not None else None,
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                key="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(map(str, raw.keys())):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    key=key,
                    message=f"unknown key `{key}`",
                    suggestion=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    if "max_file_mb" in raw:
        val = raw["max_file_mb"]
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    key="max_file_mb",
                    message="invalid type for `max_file_mb`",
                    suggestion="expected a positive integer",
                )
            )
        elif val <= 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    key="max_file_mb",
                    message=f"`max_file_mb` must be a positive integer, got {val}",
                )
            )

    if "fail_on" in raw:
        val = raw["fail_on"]
        if not isinstance(val, str) or val not in VALID_SEVERITIES:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    key="fail_on",
                    message="invalid value for `fail_on`",
                    suggestion=f"expected one of: {', '.join(sorted(VALID_SEVERITIES))}; got: {val!r}",
                )
            )

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            val = raw[key]
            if val is not None and not _is_string_list(val):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        key=key,
                        message=f"invalid type for `{key}`",
                        suggestion="expected a list of strings",
                    )
                )
            elif key == "skill_globs" and not val:
                errors.append(
                    ValidationError(
                        code=CFG007,
                        path=path_str,
                        key=key,
                        message="`skill_globs` must contain at least one pattern",
                    )
                )
            elif key == "skill_globs":
                for pattern in val:
                    if not is_relative_glob(pattern):
                        errors.append(
                            ValidationError(
                                code=CFG007,
                                path=path_str,
                                key=key,
                                message=f"skill glob `{pattern}` escapes the workspace root",
                                suggestion="use a pattern relative to the root, e.g. skills/*/SKILL.md",
                            )
                        )

    for key in STRING_KEYS:
        if key in raw:
            val = raw[key]
            if not isinstance(val, str) or not val.strip():
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        key=key,
                        message=f"invalid type for `{key}`",
                        suggestion="expected a non-empty string",
                    )
                )

    _validate_checks_block(raw, path_str, errors)
    _validate_categories_block(raw, path_str, errors)

    return errors


def _validate_checks_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``checks`` nested mapping in skillbook.yaml."""
    if "checks" not in raw:
        return
    checks = raw["checks"]
    if checks is None:
        return
    if not isinstance(checks, dict):
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                key="checks",
                message="`checks` must be a mapping",
                suggestion="expected keys: disabled",
            )
        )
        return

    for key in sorted(map(str, checks.keys())):
        if key not in ALLOWED_CHECKS_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    key=f"checks.{key}",
                    message=f"unknown key `checks.{key}`",
                    suggestion=_suggest_key(key, ALLOWED_CHECKS_KEYS),
                )
            )

    disabled = checks.get("disabled")
    if disabled is None:
        return
    if not _is_string_list(disabled):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                key="checks.disabled",
                message="invalid type for `checks.disabled`",
                suggestion="expected a list of strings",
            )
        )
        return
    for check_id in disabled:
        if check_id not in ALL_CHECK_IDS:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    key="checks.disabled",
                    message=f"unknown check id `{check_id}`",
                    suggestion=_suggest_key(check_id, ALL_CHECK_IDS),
                )
            )


def _validate_categories_block(
    raw: dict[str, Any],
    path_str: str,
    errors: list[ValidationError],
) -> None:
    """Validate the ``categories`` nested mapping in skillbook.yaml."""
    if "categories" not in raw:
        return
    categories = raw["categories"]
    if categories is None:
        return
    if not isinstance(categories, dict):
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                key="categories",
                message="`categories` must be a mapping of category name to settings",
            )
        )
        return

    for name, settings in categories.items():
        key_prefix = f"categories.{name}"
        if name == UNKNOWN_CATEGORY:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    key=key_prefix,
                    message=f"`{UNKNOWN_CATEGORY}` is a reserved category name",
                )
            )
            continue
        if settings is None:
            continue
        if not isinstance(settings, dict):
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    key=key_prefix,
                    message=f"`{key_prefix}` must be a mapping",
                )
            )
            continue

        for key in sorted(map(str, settings.keys())):
            if key not in ALLOWED_CATEGORY_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        key=f"{key_prefix}.{key}",
                        message=f"unknown key `{key_prefix}.{key}`",
                        suggestion=_suggest_key(key, ALLOWED_CATEGORY_KEYS),
                    )
                )

        for key in CATEGORY_INT_KEYS:
            if key not in settings:
                continue
            val = settings[key]
            if isinstance(val, bool) or not isinstance(val, int):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        key=f"{key_prefix}.{key}",
                        message=f"invalid type for `{key_prefix}.{key}`",
                        suggestion="expected a non-negative integer",
                    )
                )
            elif val < 0:
                errors.append(
                    ValidationError(
                        code=CFG007,
                        path=path_str,
                        key=f"{key_prefix}.{key}",
                        message=f"`{key_prefix}.{key}` must be >= 0, got {val}",
                    )
                )

        for key in CATEGORY_LIST_KEYS:
            if key in settings and settings[key] is not None and not _is_string_list(settings[key]):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        key=f"{key_prefix}.{key}",
                        message=f"invalid type for `{key_prefix}.{key}`",
                        suggestion="expected a list of strings",
                    )
                )


def _is_string_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
