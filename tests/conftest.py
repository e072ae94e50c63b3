"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def basic_repo_root(fixtures_root: Path) -> Path:
    """Return the primary fixture repository path."""
    return fixtures_root / "repos" / "basic"


@pytest.fixture()
def write_skill(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes ``skills/<folder>/SKILL.md`` under ``tmp_path``."""

    def _write(
        folder: str,
        body: str = "# Title\n",
        *,
        name: str | None = None,
        description: str | None = "A test skill.",
        frontmatter: str | None = None,
    ) -> Path:
        skill_dir = tmp_path / "skills" / folder
        skill_dir.mkdir(parents=True, exist_ok=True)
        if frontmatter is None:
            lines = [f"name: {name if name is not None else folder}"]
            if description is not None:
                lines.append(f"description: {description}")
            frontmatter = "\n".join(lines) + "\n"
        path = skill_dir / "SKILL.md"
        path.write_text(f"---\n{frontmatter}---\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def write_agent(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes ``agents/<name>.md`` with a ``skills`` line."""

    def _write(name: str, skills: str) -> Path:
        agents_dir = tmp_path / "agents"
        agents_dir.mkdir(parents=True, exist_ok=True)
        path = agents_dir / f"{name}.md"
        path.write_text(
            f"---\nname: {name}\ndescription: {name} agent\nskills: {skills}\n---\n\n# {name}\n",
            encoding="utf-8",
        )
        return path

    return _write
