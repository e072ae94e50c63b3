"""Workspace-wide checks spanning skills, agents and pipeline configs."""

from __future__ import annotations

from skillbook.catalog.discovery import stable_path_key
from skillbook.checks.base import CorpusCheck
from skillbook.checks.context import LintContext
from skillbook.constants import checks as ids
from skillbook.constants.discovery import SKILLS_DIRNAME
from skillbook.model import CheckResult


class DuplicateNameCheck(CorpusCheck):
    """No two skill documents declare the same name."""

    check_id = ids.DUPLICATE_NAME
    severity = "error"
    title = "No two skills declare the same name"

    def run(self, *, context: LintContext) -> CheckResult:
        duplicates = context.catalog.duplicates
        if not duplicates:
            return self.passed()
        details = tuple(
            f"{name}: {', '.join(stable_path_key(path, context.root) for path in paths)}"
            for name, paths in sorted(duplicates.items())
        )
        return self.failed(f"{len(duplicates)} skill name(s) declared more than once", details=details)


class AgentSkillsExistCheck(CorpusCheck):
    """Every skill an agent lists has a directory under ``skills/``."""

    check_id = ids.AGENT_SKILLS_EXIST
    severity = "warning"
    title = "Agent skill references point to existing skill directories"

    def run(self, *, context: LintContext) -> CheckResult:
        if context.agents is None:
            return self.skipped("no agents directory")
        skills_root = context.root / SKILLS_DIRNAME
        known = set(context.catalog.by_directory())
        details = tuple(
            f"Agent {agent.name} references non-existent skill: {skill}"
            for agent in context.agents
            for skill in agent.skills
            if skill not in known and not (skills_root / skill).is_dir()
        )
        if not details:
            return self.passed()
        return self.failed(f"{len(details)} dangling agent skill reference(s)", details=details)


class PipelineSyncCheck(CorpusCheck):
    """Pipeline agent configs list the same skills as the agent they name."""

    check_id = ids.PIPELINE_SYNC
    severity = "warning"
    title = "Pipeline agent configs list the same skills as their agent"

    def run(self, *, context: LintContext) -> CheckResult:
        if context.pipeline_configs is None:
            return self.skipped("no pipeline/agents directory")
        agents = {agent.name: agent for agent in context.agents or ()}
        details: list[str] = []
        for pipeline in context.pipeline_configs:
            agent = agents.get(pipeline.agent)
            if agent is None:
                details.append(f"Pipeline {pipeline.name} references non-existent agent: {pipeline.agent}")
                continue
            pipeline_skills = sorted(pipeline.skills)
            agent_skills = sorted(agent.skills)
            if pipeline_skills != agent_skills:
                details.append(
                    f"Pipeline {pipeline.name} skills mismatch with agent {agent.name}: "
                    f"pipeline [{' '.join(pipeline_skills)}] vs agent [{' '.join(agent_skills)}]"
                )
        if not details:
            return self.passed(f"{len(context.pipeline_configs)} pipeline configs")
        return self.failed(f"{len(details)} pipeline config mismatch(es)", details=tuple(details))


CORPUS_CHECKS: tuple[type[CorpusCheck], ...] = (
    DuplicateNameCheck,
    AgentSkillsExistCheck,
    PipelineSyncCheck,
)
