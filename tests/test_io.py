"""Tests for atomic file helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillbook.io import atomic_writer, read_json, write_json_atomic, write_text_atomic


def test_write_json_atomic_leaves_no_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "report.json"

    with pytest.raises(TypeError):
        write_json_atomic(out_path, {"bad": object()})

    assert list(tmp_path.iterdir()) == []


def test_write_json_atomic_sorts_keys_and_ends_with_newline(tmp_path: Path) -> None:
    out_path = tmp_path / "nested" / "summary.json"

    write_json_atomic(out_path, {"b": 1, "a": [1, 2]})

    text = out_path.read_text(encoding="utf-8")
    assert text.index('"a"') < text.index('"b"')
    assert text.endswith("}\n")
    assert read_json(out_path) == {"a": [1, 2], "b": 1}


def test_write_text_atomic_replaces_existing_file(tmp_path: Path) -> None:
    out_path = tmp_path / "SUMMARY.md"
    out_path.write_text("old\n", encoding="utf-8")

    write_text_atomic(out_path, "new\n")

    assert out_path.read_text(encoding="utf-8") == "new\n"
    assert [item.name for item in tmp_path.iterdir()] == ["SUMMARY.md"]


def test_atomic_writer_keeps_previous_content_when_body_raises(tmp_path: Path) -> None:
    out_path = tmp_path / "SUMMARY.md"
    out_path.write_text("old\n", encoding="utf-8")

    with pytest.raises(RuntimeError), atomic_writer(out_path) as handle:
        handle.write("partial")
        raise RuntimeError("interrupted")

    assert out_path.read_text(encoding="utf-8") == "old\n"
    assert [item.name for item in tmp_path.iterdir()] == ["SUMMARY.md"]


def test_atomic_writer_uses_hidden_sibling_temp_file(tmp_path: Path) -> None:
    out_path = tmp_path / "summary.json"

    with atomic_writer(out_path) as handle:
        temp_name = Path(handle.name).name
        handle.write("{}\n")

    assert temp_name.startswith(".summary.json.")
    assert temp_name.endswith(".tmp")
    assert out_path.read_text(encoding="utf-8") == "{}\n"
