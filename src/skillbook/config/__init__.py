"""Configuration loading, validation, and normalization for Skillbook workspaces."""

from __future__ import annotations

from skillbook.config.loader import load_config
from skillbook.config.model import SkillbookConfig
from skillbook.config.validator import validate_config_file

__all__ = [
    "SkillbookConfig",
    "load_config",
    "validate_config_file",
]
