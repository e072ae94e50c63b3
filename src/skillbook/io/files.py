"""Atomic report writes and JSON reads."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from skillbook.constants.reporting import ATOMIC_TEMP_SUFFIX


def read_json(path: Path) -> object:
    """Parse the UTF-8 JSON document at ``path``."""
    return json.loads(path.read_text(encoding="utf-8"))


@contextmanager
def atomic_writer(path: Path) -> Iterator[TextIO]:
    """Yield a handle on a hidden sibling temp file that replaces ``path`` on success.

    Readers never observe a half-written ``path``; on any error the temp file
    is removed and ``path`` keeps its previous content.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    handle = tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=ATOMIC_TEMP_SUFFIX,
        delete=False,
    )
    temp_path = Path(handle.name)
    try:
        with handle:
            yield handle
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def write_text_atomic(path: Path, content: str) -> None:
    with atomic_writer(path) as handle:
        handle.write(content)


def write_json_atomic(path: Path, payload: object) -> None:
    """Write ``payload`` as indented JSON with sorted keys and a trailing newline."""
    with atomic_writer(path) as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)
        handle.write("\n")
