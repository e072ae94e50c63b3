"""Configuration defaults and filenames."""

from __future__ import annotations

from typing import Any

CONFIG_FILENAME: str = "skillbook.yaml"
DEFAULT_MAX_FILE_MB: int = 2

DEFAULT_SKILL_GLOBS: tuple[str, ...] = ("skills/*/SKILL.md",)
DEFAULT_AGENTS_DIR: str = "agents"
DEFAULT_PIPELINE_DIR: str = "pipeline"
DEFAULT_UTILITY_SKILLS: tuple[str, ...] = ("pipeline", "pipeline-status", "review")
# Agents whose skills and files are always resolved and installed.
DEFAULT_CORE_AGENTS: tuple[str, ...] = (
    "pipeline-agent",
    "pm-agent",
    "ba-agent",
    "designer-agent",
    "architect-agent",
    "integration-agent",
    "qa-agent",
)
DEFAULT_FAIL_ON: str = "error"

UNKNOWN_CATEGORY: str = "unknown"
UTILITY_CATEGORY: str = "utility"

# Ordered: the first category whose pattern matches a skill directory name wins.
DEFAULT_CATEGORIES: dict[str, dict[str, Any]] = {
    "dev": {
        "patterns": [
            "rails-*",
            "react-*",
            "flutter-*",
            "node-*",
            "odoo-*",
            "salesforce-*",
            "git-workflow",
            "code-review-practices",
        ],
        "min_lines": 300,
        "min_sources": 5,
        "min_code_blocks": 3,
        "required_sections": ["Best Practices", "Anti-Patterns", "Sources & References"],
    },
    "devops": {
        "patterns": [
            "aws-*",
            "azure-*",
            "gcloud-*",
            "firebase-*",
            "flyio-*",
            "devops-*",
            "terraform-patterns",
            "kubernetes-patterns",
            "observability-practices",
            "incident-management",
        ],
        "min_lines": 300,
        "min_sources": 5,
        "min_code_blocks": 3,
        "required_sections": ["Best Practices", "Sources & References"],
    },
    "qa": {
        "patterns": [
            "testing-*",
            "playwright-testing",
            "performance-testing",
            "accessibility-testing",
            "chaos-engineering",
        ],
        "min_lines": 300,
        "min_sources": 5,
        "min_code_blocks": 3,
        "required_sections": ["Best Practices", "Sources & References"],
    },
    "planning": {
        "patterns": [
            "task-*",
            "domain-*",
            "design-*",
            "agile-frameworks",
            "stakeholder-communication",
            "requirements-elicitation",
            "process-modeling",
            "architecture-documentation",
            "security-architecture",
            "api-design",
            "api-security",
        ],
        "min_lines": 200,
        "min_sources": 3,
        "min_code_blocks": 1,
        "required_sections": ["Sources & References"],
    },
    "utility": {
        "patterns": ["pipeline", "pipeline-status", "review"],
        "min_lines": 0,
        "min_sources": 0,
        "min_code_blocks": 0,
        "required_sections": [],
    },
}

UNKNOWN_CATEGORY_THRESHOLDS: dict[str, Any] = {
    "min_lines": 200,
    "min_sources": 3,
    "min_code_blocks": 1,
    "required_sections": ["Sources & References"],
}
