"""Parsing-related exceptions."""

from __future__ import annotations

from skillbook.exceptions.base import SkillbookError


class SkillParseError(SkillbookError, ValueError):
    """Raised when a SKILL.md or agent file cannot be parsed."""
