"""Preflight validation orchestrator.

Shared by ``skillbook validate-config`` and ``skillbook lint`` so the two
paths report configuration problems identically.
"""

from __future__ import annotations

from pathlib import Path

from skillbook.config import validate_config_file
from skillbook.constants.validation import CFG009
from skillbook.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight validation checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    errors: list[ValidationError] = []
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        errors.append(
            ValidationError(
                code=CFG009,
                path=str(resolved_root),
                key="",
                message=f"root directory does not exist: {resolved_root}",
            )
        )
        return sort_errors(errors)

    errors.extend(validate_config_file(root, config_path, config_explicit=config_path is not None))
    return sort_errors(errors)
