"""File discovery and skill naming helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from skillbook.config.model import is_relative_glob
from skillbook.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillbook.exceptions import ConfigError

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path, skill_globs: tuple[str, ...], max_file_mb: int) -> list[Path]:
    """Discover SKILL.md files by configured glob patterns."""
    discovered: set[Path] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()

    for pattern in skill_globs:
        if not is_relative_glob(pattern):
            raise ConfigError(f"Skill glob must be relative to the workspace root: {pattern}")
        for path in resolved_root.glob(pattern):
            if not path.is_file() or path.name != SKILL_MARKDOWN_FILENAME:
                continue
            try:
                size = path.stat().st_size
            except OSError as exc:
                logger.warning("Cannot stat %s: %s", path, exc)
                continue
            if size > size_limit_bytes:
                logger.warning("Skipping %s: %d bytes exceeds the %d MB limit", path, size, max_file_mb)
                continue
            discovered.add(path.resolve())

    return sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))


def derive_skill_name(file_path: Path, *, declared_name: str | None = None) -> str:
    """Return the catalog name: the declared frontmatter name, else the skill folder."""
    if declared_name:
        return declared_name
    return file_path.parent.name


def stable_path_key(file_path: Path, root: Path) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
