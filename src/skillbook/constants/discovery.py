"""Constants for filesystem discovery and agent lookup."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
SKILLS_DIRNAME: str = "skills"
AGENT_FILE_GLOB: str = "*.md"
PIPELINE_AGENT_FILE_GLOB: str = "*.json"
PIPELINE_AGENTS_DIRNAME: str = "agents"
