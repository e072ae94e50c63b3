"""Parser for agent definition files that list the skills an agent uses."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from skillbook.constants.parsing import AGENT_SKILLS_SEPARATOR
from skillbook.exceptions import SkillParseError
from skillbook.model import AgentDefinition
from skillbook.parsers.skill_markdown import read_markdown_text, split_frontmatter


def parse_agent_markdown_file(path: Path) -> AgentDefinition:
    """Parse an ``agents/<name>.md`` file.

    ``skills`` may be a comma-separated string (``skills: a, b``) or a YAML
    list. The agent name defaults to the file stem.
    """
    raw_text = read_markdown_text(path)
    frontmatter, _, _ = split_frontmatter(raw_text, path)
    frontmatter = frontmatter or {}

    name = frontmatter.get("name")
    description = frontmatter.get("description")
    return AgentDefinition(
        name=name.strip() if isinstance(name, str) and name.strip() else path.stem,
        path=path,
        description=description.strip() if isinstance(description, str) else "",
        skills=_parse_skill_list(frontmatter.get("skills"), path),
    )


def _parse_skill_list(value: Any, path: Path) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        items = value.split(AGENT_SKILLS_SEPARATOR)
    elif isinstance(value, list) and all(isinstance(item, str) for item in value):
        items = value
    else:
        raise SkillParseError(f"`skills` in {path} must be a comma-separated string or a list of strings")

    skills: list[str] = []
    for item in items:
        cleaned = item.strip()
        if cleaned and cleaned not in skills:
            skills.append(cleaned)
    return tuple(skills)
