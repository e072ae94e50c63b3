"""Catalog lookup exceptions."""

from __future__ import annotations

from skillbook.exceptions.base import SkillbookError


class SkillNotFoundError(SkillbookError, KeyError):
    """Raised when a skill name is not present in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown skill: {self.name}"
