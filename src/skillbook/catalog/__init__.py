"""Skill discovery and the name-keyed skill catalog."""

from .catalog import SkillCatalog
from .discovery import derive_skill_name, discover_skill_files

__all__ = ["SkillCatalog", "derive_skill_name", "discover_skill_files"]
