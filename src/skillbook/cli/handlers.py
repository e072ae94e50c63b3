"""CLI subcommand handlers for catalog lookup, config validation and install."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass

from skillbook.agents import (
    PipelineAgentConfig,
    install_agents,
    install_skills,
    load_agents,
    load_pipeline_configs,
    resolve_skills,
    select_agents,
)
from skillbook.catalog import SkillCatalog
from skillbook.config import SkillbookConfig, load_config
from skillbook.exceptions import ConfigError, SkillbookError, SkillNotFoundError
from skillbook.exceptions.validation import format_errors
from skillbook.model import AgentDefinition, Skill
from skillbook.validation import preflight_validate


def handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_list(args: argparse.Namespace) -> int:
    """Print every skill name with its description."""
    try:
        config, catalog = _load_catalog(args)
        if args.category is not None and config.category_named(args.category) is None:
            raise ConfigError(f"Unknown category '{args.category}'")
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    skills = catalog.in_category(args.category) if args.category else list(catalog)
    if args.json:
        payload = [
            {"name": skill.name, "description": skill.description, "category": skill.category}
            for skill in skills
        ]
        print(json.dumps(payload, indent=2))
        return 0

    width = max((len(skill.name) for skill in skills), default=0)
    for skill in skills:
        print(f"{skill.name:<{width}}  {skill.description}")
    return 0


def handle_show(args: argparse.Namespace) -> int:
    """Print one skill's metadata and verbatim body."""
    try:
        _, catalog = _load_catalog(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        skill = _lookup(catalog, args.name)
    except SkillNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if not args.body_only:
        print(f"name: {skill.name}")
        print(f"description: {skill.description}")
        print(f"category: {skill.category}")
        print(f"path: {skill.path}")
        print()
    print(skill.body, end="" if skill.body.endswith("\n") else "\n")
    return 0


def handle_resolve(args: argparse.Namespace) -> int:
    """Print the sorted skills needed by the core and selected agents, one per line."""
    try:
        selection = _select(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    for name in selection.skills:
        print(name)
    return 0


def handle_install(args: argparse.Namespace) -> int:
    """Copy the resolved skills, agent files and pipeline configs into the target."""
    try:
        selection = _select(args)
        _, catalog = _load_catalog(args)
        result = install_skills(catalog, selection.skills, args.target)
        agent_result = install_agents(
            selection.agents,
            selection.pipeline_configs,
            args.target,
            agents_dirname=selection.config.agents_dir,
            pipeline_dirname=selection.config.pipeline_dir,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except (SkillbookError, OSError) as exc:
        print(f"Install error: {exc}", file=sys.stderr)
        return 1

    print(f"Installed {len(result.installed)} skills into {result.target.resolve()}")
    print(f"Installed {len(agent_result.agents)} agents and {len(agent_result.pipeline_configs)} pipeline configs")
    for name in result.missing:
        print(f"  missing: {name}", file=sys.stderr)
    return 1 if result.missing else 0


def _load_catalog(args: argparse.Namespace) -> tuple[SkillbookConfig, SkillCatalog]:
    root = args.root.resolve()
    if not root.is_dir():
        raise ConfigError(f"root directory does not exist: {root}")
    config = load_config(root, args.config)
    return config, SkillCatalog.load(root, config)


def _lookup(catalog: SkillCatalog, name: str) -> Skill:
    if name in catalog:
        return catalog.get(name)
    skill = catalog.by_directory().get(name)
    if skill is None:
        raise SkillNotFoundError(name)
    return skill


@dataclass(frozen=True)
class _Selection:
    config: SkillbookConfig
    agents: tuple[AgentDefinition, ...]
    pipeline_configs: tuple[PipelineAgentConfig, ...]
    skills: tuple[str, ...]


def _select(args: argparse.Namespace) -> _Selection:
    if not args.agents and not args.all:
        raise ConfigError("name at least one agent or pass --all")
    root = args.root.resolve()
    config = load_config(root, args.config)
    agents_dir = config.agents_path(root)
    if not agents_dir.is_dir():
        raise ConfigError(f"agents directory does not exist: {agents_dir}")
    agents, _ = load_agents(agents_dir)
    selected = tuple(agent.name for agent in agents) if args.all else tuple(args.agents)
    pipeline_configs, _ = load_pipeline_configs(config.pipeline_path(root))
    return _Selection(
        config=config,
        agents=select_agents(agents, selected, config.core_agents),
        pipeline_configs=pipeline_configs,
        skills=resolve_skills(agents, selected, config.utility_skills, config.core_agents),
    )
