"""Branding constants for docs and terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKILLBOOK"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKILLBOOK",
    "     // loader and linter for SKILL.md corpora",
)
LINT_SUMMARY_TITLE: str = "Skill structural quality checks"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill corpus tool"))
