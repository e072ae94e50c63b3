"""Agent definitions, pipeline configs and agent-to-skill resolution."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from skillbook.constants.discovery import AGENT_FILE_GLOB, PIPELINE_AGENT_FILE_GLOB, PIPELINE_AGENTS_DIRNAME
from skillbook.exceptions import ConfigError, SkillParseError
from skillbook.io import read_json
from skillbook.model import AgentDefinition
from skillbook.parsers import parse_agent_markdown_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineAgentConfig:
    """A ``pipeline/agents/<name>.json`` entry pairing an agent with skills."""

    name: str
    path: Path
    agent: str
    skills: tuple[str, ...]


def load_agents(agents_dir: Path) -> tuple[tuple[AgentDefinition, ...], list[str]]:
    """Parse every agent file in ``agents_dir``.

    Returns the agents sorted by name plus warnings for unparseable files.
    A missing directory yields no agents and no warnings.
    """
    if not agents_dir.is_dir():
        return (), []

    agents: list[AgentDefinition] = []
    warnings: list[str] = []
    for path in sorted(agents_dir.glob(AGENT_FILE_GLOB)):
        if not path.is_file():
            continue
        try:
            agents.append(parse_agent_markdown_file(path))
        except SkillParseError as exc:
            warning = f"Parse error in agent file {path.name}: {exc}"
            warnings.append(warning)
            logger.warning(warning)
    return tuple(sorted(agents, key=lambda agent: agent.name)), warnings


def load_pipeline_configs(pipeline_dir: Path) -> tuple[tuple[PipelineAgentConfig, ...], list[str]]:
    """Read ``<pipeline_dir>/agents/*.json`` files that name an agent."""
    agents_dir = pipeline_dir / PIPELINE_AGENTS_DIRNAME
    if not agents_dir.is_dir():
        return (), []

    configs: list[PipelineAgentConfig] = []
    warnings: list[str] = []
    for path in sorted(agents_dir.glob(PIPELINE_AGENT_FILE_GLOB)):
        try:
            payload = read_json(path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            warning = f"Parse error in pipeline config {path.name}: {exc}"
            warnings.append(warning)
            logger.warning(warning)
            continue
        if not isinstance(payload, dict):
            warnings.append(f"Pipeline config {path.name} must be a JSON object")
            continue
        agent = payload.get("agent")
        if not isinstance(agent, str) or not agent.strip():
            logger.debug("Pipeline config %s names no agent; ignoring", path.name)
            continue
        skills = payload.get("skills", [])
        if not isinstance(skills, list) or not all(isinstance(item, str) for item in skills):
            warnings.append(f"Pipeline config {path.name}: `skills` must be a list of strings")
            continue
        configs.append(
            PipelineAgentConfig(
                name=path.stem,
                path=path,
                agent=agent.strip(),
                skills=tuple(skill.strip() for skill in skills if skill.strip()),
            )
        )
    return tuple(configs), warnings


def select_agents(
    agents: tuple[AgentDefinition, ...],
    selected: tuple[str, ...],
    core_agents: tuple[str, ...] = (),
) -> tuple[AgentDefinition, ...]:
    """Return the core agents followed by the selected ones, without repeats.

    An unknown selected agent is a ``ConfigError``; core agents absent from
    the agents directory are skipped.
    """
    by_name = {agent.name: agent for agent in agents}
    unknown = sorted(set(selected) - set(by_name))
    if unknown:
        raise ConfigError(f"Unknown agent(s): {', '.join(unknown)}")

    absent_core = [name for name in core_agents if name not in by_name]
    if absent_core:
        logger.debug("Core agent(s) not found, skipping: %s", ", ".join(absent_core))
    names = dict.fromkeys([*(name for name in core_agents if name in by_name), *selected])
    return tuple(by_name[name] for name in names)


def resolve_skills(
    agents: tuple[AgentDefinition, ...],
    selected: tuple[str, ...],
    utility_skills: tuple[str, ...] = (),
    core_agents: tuple[str, ...] = (),
) -> tuple[str, ...]:
    """Return the sorted, de-duplicated skills needed by the selected agents.

    Utility skills and the skills of every core agent are always included.
    """
    resolved: set[str] = set(utility_skills)
    for agent in select_agents(agents, selected, core_agents):
        resolved.update(agent.skills)
    return tuple(sorted(resolved))
