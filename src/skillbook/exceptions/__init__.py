"""Shared exception hierarchy for Skillbook."""

from __future__ import annotations

from .base import SkillbookError
from .config import ConfigError
from .lookup import SkillNotFoundError
from .parsing import SkillParseError

__all__ = ["ConfigError", "SkillNotFoundError", "SkillParseError", "SkillbookError"]
