"""Tests for agent loading, skill resolution and installation."""

from __future__ import annotations

import json
import logging
import shutil
from collections.abc import Callable
from pathlib import Path

import pytest

from skillbook.agents import (
    install_agents,
    install_skills,
    load_agents,
    load_pipeline_configs,
    resolve_skills,
    select_agents,
)
from skillbook.catalog import SkillCatalog
from skillbook.exceptions import ConfigError
from skillbook.model import AgentDefinition


def test_load_agents_sorted_by_name(basic_repo_root: Path) -> None:
    agents, warnings = load_agents(basic_repo_root / "agents")

    assert [agent.name for agent in agents] == ["dev-rails", "planner"]
    assert warnings == []


def test_load_agents_missing_directory(tmp_path: Path) -> None:
    assert load_agents(tmp_path / "agents") == ((), [])


def test_load_agents_warns_on_unparseable_file(
    write_agent: Callable[[str, str], Path],
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_agent("ok", "a, b")
    (tmp_path / "agents" / "broken.md").write_text("---\nskills: [unclosed\n---\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        agents, warnings = load_agents(tmp_path / "agents")

    assert [agent.name for agent in agents] == ["ok"]
    assert len(warnings) == 1
    assert "broken.md" in warnings[0]
    assert "broken.md" in caplog.text


def test_load_pipeline_configs_reads_agent_entries(basic_repo_root: Path) -> None:
    configs, warnings = load_pipeline_configs(basic_repo_root / "pipeline")

    assert warnings == []
    assert len(configs) == 1
    assert configs[0].name == "dev-rails"
    assert configs[0].agent == "dev-rails"
    assert configs[0].skills == ("pipeline", "rails-patterns")


def test_load_pipeline_configs_skips_invalid_payloads(tmp_path: Path) -> None:
    agents_dir = tmp_path / "pipeline" / "agents"
    agents_dir.mkdir(parents=True)
    (agents_dir / "bad.json").write_text("{not json", encoding="utf-8")
    (agents_dir / "list.json").write_text("[]", encoding="utf-8")
    (agents_dir / "no-agent.json").write_text(json.dumps({"skills": ["a"]}), encoding="utf-8")
    (agents_dir / "wrong-skills.json").write_text(json.dumps({"agent": "x", "skills": "a"}), encoding="utf-8")

    configs, warnings = load_pipeline_configs(tmp_path / "pipeline")

    assert configs == ()
    assert len(warnings) == 3


def test_resolve_skills_unions_utility_and_agent_skills() -> None:
    agents = (
        AgentDefinition(name="dev-rails", path=Path("dev-rails.md"), skills=("rails-patterns", "git-workflow")),
        AgentDefinition(name="dev-node", path=Path("dev-node.md"), skills=("node-patterns", "git-workflow")),
    )

    resolved = resolve_skills(agents, ("dev-rails", "dev-node"), ("review", "pipeline"))

    assert resolved == ("git-workflow", "node-patterns", "pipeline", "rails-patterns", "review")


def test_resolve_skills_with_no_agents_returns_utility_only() -> None:
    assert resolve_skills((), (), ("review", "pipeline")) == ("pipeline", "review")


def test_resolve_skills_rejects_unknown_agent() -> None:
    with pytest.raises(ConfigError, match="ghost"):
        resolve_skills((), ("ghost",))


def test_install_copies_skill_directories(basic_repo_root: Path, tmp_path: Path) -> None:
    catalog = SkillCatalog.load(basic_repo_root)
    target = tmp_path / "project"

    result = install_skills(catalog, ("pipeline", "rails-patterns", "nope"), target)

    assert result.installed == ("pipeline", "rails-patterns")
    assert result.missing == ("nope",)
    assert (target / "skills" / "rails-patterns" / "SKILL.md").is_file()
    assert (target / "skills" / "rails-patterns" / "references" / "patterns.md").is_file()
    assert not (target / "skills" / "task-breakdown").exists()


def test_install_removes_stale_skills(basic_repo_root: Path, tmp_path: Path) -> None:
    catalog = SkillCatalog.load(basic_repo_root)
    stale = tmp_path / "project" / "skills" / "old-skill"
    stale.mkdir(parents=True)
    (stale / "SKILL.md").write_text("old\n", encoding="utf-8")

    install_skills(catalog, ("pipeline",), tmp_path / "project")

    assert not stale.exists()
    assert sorted(path.name for path in (tmp_path / "project" / "skills").iterdir()) == ["pipeline"]


def test_install_refuses_to_overwrite_source(basic_repo_root: Path, tmp_path: Path) -> None:
    workspace = tmp_path / "workspace"
    shutil.copytree(basic_repo_root, workspace)
    catalog = SkillCatalog.load(workspace)

    with pytest.raises(ConfigError, match="overlaps the source skills"):
        install_skills(catalog, ("pipeline",), workspace)

    assert (workspace / "skills" / "pipeline" / "SKILL.md").is_file()


def test_install_refuses_source_root_even_without_parsed_skills(tmp_path: Path) -> None:
    workspace = tmp_path / "workspace"
    broken = workspace / "skills" / "broken"
    broken.mkdir(parents=True)
    (broken / "SKILL.md").write_text("---\nname: [unclosed\n---\n", encoding="utf-8")
    catalog = SkillCatalog.load(workspace)
    assert catalog.entries == ()

    with pytest.raises(ConfigError, match="overlaps the source skills"):
        install_skills(catalog, ("broken",), workspace)

    assert (broken / "SKILL.md").is_file()


def test_install_refuses_target_inside_a_skill_directory(basic_repo_root: Path, tmp_path: Path) -> None:
    workspace = tmp_path / "workspace"
    shutil.copytree(basic_repo_root, workspace)
    catalog = SkillCatalog.load(workspace)

    with pytest.raises(ConfigError, match="overlaps"):
        install_skills(catalog, ("pipeline",), workspace / "skills" / "pipeline")

    assert (workspace / "skills" / "pipeline" / "SKILL.md").is_file()


def _agent(name: str, *skills: str) -> AgentDefinition:
    return AgentDefinition(name=name, path=Path(f"{name}.md"), skills=skills)


def test_select_agents_puts_core_agents_first_without_repeats() -> None:
    agents = (_agent("dev-rails", "a"), _agent("pipeline-agent", "b"), _agent("qa-agent", "c"))

    selected = select_agents(agents, ("dev-rails", "qa-agent"), ("pipeline-agent", "qa-agent", "pm-agent"))

    assert [agent.name for agent in selected] == ["pipeline-agent", "qa-agent", "dev-rails"]


def test_select_agents_skips_absent_core_agents(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="skillbook.agents.registry"):
        selected = select_agents((_agent("dev-rails", "a"),), ("dev-rails",), ("pm-agent",))

    assert [agent.name for agent in selected] == ["dev-rails"]
    assert "pm-agent" in caplog.text


def test_resolve_skills_includes_core_agent_skills() -> None:
    agents = (_agent("dev-rails", "rails-patterns"), _agent("pipeline-agent", "pipeline-status", "pipeline"))

    resolved = resolve_skills(agents, ("dev-rails",), ("review",), ("pipeline-agent",))

    assert resolved == ("pipeline", "pipeline-status", "rails-patterns", "review")


def test_resolve_skills_with_only_core_agents() -> None:
    agents = (_agent("pipeline-agent", "pipeline"),)

    assert resolve_skills(agents, (), (), ("pipeline-agent", "ba-agent")) == ("pipeline",)


def test_install_agents_copies_definitions_and_matching_pipeline_configs(
    basic_repo_root: Path, tmp_path: Path
) -> None:
    agents, _ = load_agents(basic_repo_root / "agents")
    configs, _ = load_pipeline_configs(basic_repo_root / "pipeline")
    target = tmp_path / "project"

    result = install_agents(agents, configs, target, agents_dirname="agents", pipeline_dirname="pipeline")

    assert result.agents == ("dev-rails", "planner")
    assert result.pipeline_configs == ("dev-rails",)
    assert (target / "agents" / "dev-rails.md").read_text(encoding="utf-8") == (
        basic_repo_root / "agents" / "dev-rails.md"
    ).read_text(encoding="utf-8")
    assert (target / "agents" / "planner.md").is_file()
    assert (target / "pipeline" / "agents" / "dev-rails.json").is_file()


def test_install_agents_skips_configs_for_unselected_agents(basic_repo_root: Path, tmp_path: Path) -> None:
    agents, _ = load_agents(basic_repo_root / "agents")
    configs, _ = load_pipeline_configs(basic_repo_root / "pipeline")
    planner = tuple(agent for agent in agents if agent.name == "planner")

    result = install_agents(
        planner, configs, tmp_path / "project", agents_dirname="agents", pipeline_dirname="pipeline"
    )

    assert result.pipeline_configs == ()
    assert not (tmp_path / "project" / "pipeline").exists()


def test_install_agents_refuses_source_agents_directory(basic_repo_root: Path, tmp_path: Path) -> None:
    workspace = tmp_path / "workspace"
    shutil.copytree(basic_repo_root, workspace)
    agents, _ = load_agents(workspace / "agents")

    with pytest.raises(ConfigError, match="overlaps the source agents"):
        install_agents(agents, (), workspace, agents_dirname="agents", pipeline_dirname="pipeline")
