"""Core data models for Skillbook."""

from .entities import (
    AgentDefinition,
    CheckResult,
    CodeBlock,
    Evidence,
    Heading,
    Link,
    LintResult,
    ParsedSkillDocument,
    Skill,
    SkillReport,
)

__all__ = [
    "AgentDefinition",
    "CheckResult",
    "CodeBlock",
    "Evidence",
    "Heading",
    "Link",
    "LintResult",
    "ParsedSkillDocument",
    "Skill",
    "SkillReport",
]
