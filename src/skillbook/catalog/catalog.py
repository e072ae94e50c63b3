"""In-memory catalog of skill documents keyed by name."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from skillbook.catalog.discovery import derive_skill_name, discover_skill_files, stable_path_key
from skillbook.config import SkillbookConfig
from skillbook.exceptions import SkillNotFoundError, SkillParseError
from skillbook.model import Skill
from skillbook.parsers import parse_skill_markdown_file

logger = logging.getLogger(__name__)


class SkillCatalog:
    """Skills loaded from ``skills/*/SKILL.md`` and looked up by name.

    Files that fail to parse are excluded and reported in ``warnings``.
    ``entries`` keeps every parsed file in path order, duplicates included.
    When two files declare the same name the first path (in sorted order)
    keeps the name and the other is listed in ``duplicates``.
    """

    def __init__(
        self,
        root: Path,
        skills: list[Skill],
        *,
        warnings: tuple[str, ...] = (),
        duplicates: dict[str, tuple[Path, ...]] | None = None,
        parse_errors: dict[Path, str] | None = None,
    ) -> None:
        self.root = root
        self.entries = tuple(skills)
        self._skills: dict[str, Skill] = {}
        for skill in skills:
            self._skills.setdefault(skill.name, skill)
        self.warnings = warnings
        self.duplicates = duplicates or {}
        self.parse_errors = parse_errors or {}

    @classmethod
    def load(cls, root: Path, config: SkillbookConfig | None = None) -> SkillCatalog:
        """Discover and parse every skill document under ``root``."""
        config = config or SkillbookConfig()
        root = root.resolve()
        warnings: list[str] = []
        parse_errors: dict[Path, str] = {}
        skills: list[Skill] = []
        paths_by_name: dict[str, list[Path]] = {}

        for path in discover_skill_files(root, config.skill_globs, config.max_file_mb):
            try:
                document = parse_skill_markdown_file(path)
            except SkillParseError as exc:
                warning = f"Parse error in {stable_path_key(path, root)}: {exc}"
                warnings.append(warning)
                logger.warning(warning)
                parse_errors[path] = str(exc)
                continue

            name = derive_skill_name(path, declared_name=document.declared_name)
            paths_by_name.setdefault(name, []).append(path)
            skills.append(
                Skill(
                    name=name,
                    description=document.description or "",
                    path=path,
                    category=config.categorize(path.parent.name).name,
                    document=document,
                )
            )

        duplicates: dict[str, tuple[Path, ...]] = {}
        for name, paths in sorted(paths_by_name.items()):
            if len(paths) <= 1:
                continue
            duplicates[name] = tuple(paths)
            rendered = ", ".join(stable_path_key(path, root) for path in paths)
            warning = f"Duplicate skill name '{name}' declared by {rendered}; keeping the first."
            warnings.append(warning)
            logger.warning(warning)

        logger.debug("Loaded %d skills from %s", len(skills), root)
        return cls(root, skills, warnings=tuple(warnings), duplicates=duplicates, parse_errors=parse_errors)

    def __len__(self) -> int:
        return len(self._skills)

    def __contains__(self, name: object) -> bool:
        return name in self._skills

    def __iter__(self) -> Iterator[Skill]:
        return (self._skills[name] for name in self.names())

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._skills))

    def get(self, name: str) -> Skill:
        try:
            return self._skills[name]
        except KeyError:
            raise SkillNotFoundError(name) from None

    def body(self, name: str) -> str:
        """Return the Markdown body after the frontmatter, verbatim."""
        return self.get(name).body

    def describe(self) -> list[tuple[str, str]]:
        """Return ``(name, description)`` pairs in name order."""
        return [(skill.name, skill.description) for skill in self]

    def in_category(self, category: str) -> list[Skill]:
        return [skill for skill in self if skill.category == category]

    def by_directory(self) -> dict[str, Skill]:
        """Index skills by their folder name under ``skills/``."""
        return {skill.directory_name: skill for skill in self}
