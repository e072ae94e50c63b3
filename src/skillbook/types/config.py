"""Typed configuration structures for Skillbook settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryConfig:
    """Name patterns and structural thresholds for one skill category."""

    name: str
    patterns: tuple[str, ...] = ()
    min_lines: int = 0
    min_sources: int = 0
    min_code_blocks: int = 0
    required_sections: tuple[str, ...] = ()


@dataclass(frozen=True)
class ChecksConfig:
    """Check ids switched off for the workspace."""

    disabled: tuple[str, ...] = ()
