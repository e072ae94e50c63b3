"""Tests for the name-keyed skill catalog."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from skillbook.catalog import SkillCatalog
from skillbook.exceptions import SkillbookError, SkillNotFoundError


def test_catalog_loads_fixture_workspace(basic_repo_root: Path) -> None:
    catalog = SkillCatalog.load(basic_repo_root)

    assert catalog.names() == ("pipeline", "rails-patterns", "task-planning")
    assert len(catalog) == 3
    assert "rails-patterns" in catalog
    assert "missing" not in catalog
    assert catalog.warnings == ()


def test_catalog_describe_returns_name_description_pairs(basic_repo_root: Path) -> None:
    catalog = SkillCatalog.load(basic_repo_root)

    assert catalog.describe()[0] == ("pipeline", "Drive work items through the delivery pipeline.")


def test_catalog_assigns_categories(basic_repo_root: Path) -> None:
    catalog = SkillCatalog.load(basic_repo_root)

    assert catalog.get("rails-patterns").category == "dev"
    assert catalog.get("pipeline").category == "utility"
    assert catalog.get("task-planning").category == "planning"
    assert [skill.name for skill in catalog.in_category("dev")] == ["rails-patterns"]


def test_catalog_body_is_verbatim(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    body = "\n# Heading\n\n  indented   text  \n\n```sh\necho hi\n```\n"
    write_skill("verbatim", body)

    catalog = SkillCatalog.load(tmp_path)

    assert catalog.body("verbatim") == body


def test_catalog_get_unknown_name_raises(basic_repo_root: Path) -> None:
    catalog = SkillCatalog.load(basic_repo_root)

    with pytest.raises(SkillNotFoundError) as excinfo:
        catalog.get("nope")

    assert excinfo.value.name == "nope"
    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, SkillbookError)
    assert str(excinfo.value) == "Unknown skill: nope"


def test_catalog_falls_back_to_folder_name(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("nameless", frontmatter="description: no name here\n")

    catalog = SkillCatalog.load(tmp_path)

    assert catalog.names() == ("nameless",)
    assert catalog.get("nameless").description == "no name here"


def test_catalog_excludes_unparseable_files_with_warning(
    write_skill: Callable[..., Path],
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_skill("good")
    broken = write_skill("broken", frontmatter="name: [oops\n")

    with caplog.at_level(logging.WARNING):
        catalog = SkillCatalog.load(tmp_path)

    assert catalog.names() == ("good",)
    assert broken.resolve() in catalog.parse_errors
    assert len(catalog.warnings) == 1
    assert "skills/broken/SKILL.md" in catalog.warnings[0]
    assert "Parse error" in caplog.text


def test_catalog_duplicate_names_keep_first_path(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    first = write_skill("alpha", name="shared")
    second = write_skill("beta", name="shared")

    catalog = SkillCatalog.load(tmp_path)

    assert catalog.names() == ("shared",)
    assert catalog.get("shared").path == first.resolve()
    assert catalog.duplicates == {"shared": (first.resolve(), second.resolve())}
    assert len(catalog.entries) == 2
    assert "Duplicate skill name 'shared'" in catalog.warnings[0]


def test_catalog_iterates_in_name_order(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("zeta")
    write_skill("alpha")
    write_skill("mid")

    catalog = SkillCatalog.load(tmp_path)

    assert [skill.name for skill in catalog] == ["alpha", "mid", "zeta"]


def test_catalog_by_directory_indexes_folder_names(basic_repo_root: Path) -> None:
    catalog = SkillCatalog.load(basic_repo_root)

    assert catalog.by_directory()["task-breakdown"].name == "task-planning"


def test_catalog_empty_workspace(tmp_path: Path) -> None:
    catalog = SkillCatalog.load(tmp_path)

    assert len(catalog) == 0
    assert catalog.names() == ()
    assert catalog.describe() == []


def test_catalog_categorises_by_directory_not_declared_name(
    write_skill: Callable[..., Path], tmp_path: Path
) -> None:
    write_skill("rails-api", name="api-guide")

    catalog = SkillCatalog.load(tmp_path)

    assert catalog.get("api-guide").category == "dev"
