"""Integration tests for the full lint flow and output determinism."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from skillbook.catalog import SkillCatalog
from skillbook.linter import evaluate_exit_code, lint_workspace


def test_lint_writes_reports_and_is_deterministic(tmp_path: Path, basic_repo_root: Path) -> None:
    """Repeated lint runs over the same fixture produce byte-identical summaries."""
    first_out = tmp_path / "first"
    second_out = tmp_path / "second"

    lint_workspace(root=basic_repo_root, out=first_out, output_formats=("json",))
    lint_workspace(root=basic_repo_root, out=second_out, output_formats=("json",))

    first = (first_out / "summary.json").read_text(encoding="utf-8")
    second = (second_out / "summary.json").read_text(encoding="utf-8")
    assert first == second

    payload = json.loads(first)
    assert [skill["skill"] for skill in payload["skills"]] == ["pipeline", "rails-patterns", "task-planning"]
    assert [skill["passed"] for skill in payload["skills"]] == [True, True, False]


def test_fixing_contract_error_makes_workspace_pass(tmp_path: Path, basic_repo_root: Path) -> None:
    workspace = tmp_path / "workspace"
    shutil.copytree(basic_repo_root, workspace)
    skill_file = workspace / "skills" / "task-breakdown" / "SKILL.md"
    skill_file.write_text(
        skill_file.read_text(encoding="utf-8").replace("name: task-planning", "name: task-breakdown"),
        encoding="utf-8",
    )

    result = lint_workspace(root=workspace)

    assert result.failed_count == 0
    assert evaluate_exit_code(result) == 0
    assert "task-breakdown" in SkillCatalog.load(workspace)


def test_skill_body_is_preserved_verbatim(basic_repo_root: Path) -> None:
    skill_file = basic_repo_root / "skills" / "rails-patterns" / "SKILL.md"
    text = skill_file.read_text(encoding="utf-8")

    skill = SkillCatalog.load(basic_repo_root).get("rails-patterns")

    assert text.endswith(skill.body)
    assert "name: rails-patterns" not in skill.body
