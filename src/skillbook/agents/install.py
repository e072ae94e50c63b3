"""Copy resolved skills, agent files and pipeline configs into a target workspace."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from skillbook.agents.registry import PipelineAgentConfig
from skillbook.catalog import SkillCatalog
from skillbook.constants.discovery import PIPELINE_AGENTS_DIRNAME, SKILLS_DIRNAME
from skillbook.exceptions import ConfigError
from skillbook.model import AgentDefinition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallResult:
    """Skills copied into ``target`` and names that had no skill directory."""

    target: Path
    installed: tuple[str, ...]
    missing: tuple[str, ...]


@dataclass(frozen=True)
class AgentInstallResult:
    """Agent definition files and pipeline configs copied into ``target``."""

    target: Path
    agents: tuple[str, ...]
    pipeline_configs: tuple[str, ...]


def install_skills(catalog: SkillCatalog, skill_names: tuple[str, ...], target: Path) -> InstallResult:
    """Replace ``target/skills`` with copies of the named skill directories.

    Names are matched against skill folder names. Stale skills from an
    earlier install are removed first.
    """
    destination = (target / SKILLS_DIRNAME).resolve()
    sources = [(catalog.root / SKILLS_DIRNAME).resolve(), *(skill.directory for skill in catalog.entries)]
    for source in sources:
        _refuse_overlap(destination, source, "skills")
    if destination.exists():
        shutil.rmtree(destination)
    destination.mkdir(parents=True)

    by_directory = catalog.by_directory()
    installed: list[str] = []
    missing: list[str] = []
    for name in skill_names:
        skill = by_directory.get(name)
        if skill is None:
            logger.warning("Skill '%s' has no directory under %s; skipping", name, catalog.root)
            missing.append(name)
            continue
        shutil.copytree(skill.directory, destination / name)
        installed.append(name)

    logger.info("Installed %d skills into %s", len(installed), destination)
    return InstallResult(target=target, installed=tuple(installed), missing=tuple(missing))


def install_agents(
    agents: tuple[AgentDefinition, ...],
    pipeline_configs: tuple[PipelineAgentConfig, ...],
    target: Path,
    *,
    agents_dirname: str,
    pipeline_dirname: str,
) -> AgentInstallResult:
    """Copy agent files and the pipeline configs naming them into ``target``.

    Existing files in the target directories are kept; same-named files are
    overwritten.
    """
    agents_destination = (target / agents_dirname).resolve()
    pipeline_destination = (target / pipeline_dirname / PIPELINE_AGENTS_DIRNAME).resolve()
    names = {agent.name for agent in agents}
    selected_configs = [config for config in pipeline_configs if config.agent in names]
    for agent in agents:
        _refuse_overlap(agents_destination, agent.path.parent.resolve(), "agents")
    for config in selected_configs:
        _refuse_overlap(pipeline_destination, config.path.parent.resolve(), "pipeline configs")

    agents_destination.mkdir(parents=True, exist_ok=True)
    for agent in agents:
        shutil.copy2(agent.path, agents_destination / agent.path.name)

    if selected_configs:
        pipeline_destination.mkdir(parents=True, exist_ok=True)
    for config in selected_configs:
        shutil.copy2(config.path, pipeline_destination / config.path.name)

    logger.info("Installed %d agents and %d pipeline configs into %s", len(agents), len(selected_configs), target)
    return AgentInstallResult(
        target=target,
        agents=tuple(agent.name for agent in agents),
        pipeline_configs=tuple(config.name for config in selected_configs),
    )


def _refuse_overlap(destination: Path, source: Path, kind: str) -> None:
    if destination.is_relative_to(source) or source.is_relative_to(destination):
        raise ConfigError(
            f"Install target {destination} overlaps the source {kind} at {source}; choose another target"
        )
