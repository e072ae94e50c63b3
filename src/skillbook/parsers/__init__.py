"""Markdown parsers for skill and agent documents."""

from .agent_markdown import parse_agent_markdown_file
from .skill_markdown import parse_skill_markdown_file, split_frontmatter

__all__ = ["parse_agent_markdown_file", "parse_skill_markdown_file", "split_frontmatter"]
