"""Agent definitions, skill resolution and installation."""

from .install import AgentInstallResult, InstallResult, install_agents, install_skills
from .registry import PipelineAgentConfig, load_agents, load_pipeline_configs, resolve_skills, select_agents

__all__ = [
    "AgentInstallResult",
    "InstallResult",
    "PipelineAgentConfig",
    "install_agents",
    "install_skills",
    "load_agents",
    "load_pipeline_configs",
    "resolve_skills",
    "select_agents",
]
