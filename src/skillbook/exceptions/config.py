"""Configuration-related exceptions."""

from __future__ import annotations

from skillbook.exceptions.base import SkillbookError


class ConfigError(SkillbookError, ValueError):
    """Raised when workspace configuration is invalid."""
