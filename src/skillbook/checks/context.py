"""Shared inputs handed to every check."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillbook.agents.registry import PipelineAgentConfig
from skillbook.catalog import SkillCatalog
from skillbook.config import SkillbookConfig
from skillbook.model import AgentDefinition


@dataclass(frozen=True)
class LintContext:
    """Workspace state visible to checks.

    ``agents`` and ``pipeline_configs`` are None when their directory does
    not exist, so checks can tell "no agents" from "nothing configured".
    """

    root: Path
    config: SkillbookConfig
    catalog: SkillCatalog
    agents: tuple[AgentDefinition, ...] | None = None
    pipeline_configs: tuple[PipelineAgentConfig, ...] | None = None

    def referenced_skills(self) -> frozenset[str]:
        """Every skill name listed by any agent."""
        if not self.agents:
            return frozenset()
        return frozenset(skill for agent in self.agents for skill in agent.skills)
