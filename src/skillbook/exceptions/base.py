"""Root exception for Skillbook."""

from __future__ import annotations


class SkillbookError(Exception):
    """Base class for all Skillbook errors."""
