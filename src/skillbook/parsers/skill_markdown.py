"""Parser for SKILL.md files with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillbook.constants.parsing import (
    FENCED_CODE_BLOCK_PATTERN,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    HEADING_PATTERN,
    INLINE_CODE_PATTERN,
    INLINE_LINK_PATTERN,
    URL_LINE_PATTERN,
)
from skillbook.exceptions import SkillParseError
from skillbook.model import CodeBlock, Heading, Link, ParsedSkillDocument
from skillbook.utils import heading_anchor


def parse_skill_markdown_file(path: Path) -> ParsedSkillDocument:
    """Parse a SKILL.md file into frontmatter, verbatim body and line metadata."""
    raw_text = read_markdown_text(path)
    frontmatter, body, body_start = split_frontmatter(raw_text, path)
    lines = raw_text.lstrip("\ufeff").splitlines()
    body_lines = lines[body_start - 1 :]

    headings: list[Heading] = []
    links: list[Link] = []
    blocks: list[CodeBlock] = []
    anchor_counts: dict[str, int] = {}

    open_fence: tuple[str, str, int] | None = None
    for offset, line in enumerate(body_lines):
        index = body_start + offset
        stripped = line.strip()
        fence = _match_fence(stripped)

        if open_fence is not None:
            marker, language, start = open_fence
            if fence is not None and fence[0][0] == marker[0] and len(fence[0]) >= len(marker) and not fence[1]:
                blocks.append(CodeBlock(fence=marker, language=language, start_line=start, end_line=index))
                open_fence = None
            continue

        if fence is not None:
            open_fence = (fence[0], fence[1], index)
            continue

        heading_match = HEADING_PATTERN.match(stripped)
        if heading_match and not line.startswith("    "):
            text = heading_match.group(2).strip()
            headings.append(
                Heading(
                    level=len(heading_match.group(1)),
                    text=text,
                    line=index,
                    anchor=_unique_anchor(heading_anchor(text), anchor_counts),
                )
            )

        prose = INLINE_CODE_PATTERN.sub("", line)
        for match in INLINE_LINK_PATTERN.finditer(prose):
            links.append(Link(target=match.group(1), line=index))

    if open_fence is not None:
        marker, language, start = open_fence
        blocks.append(CodeBlock(fence=marker, language=language, start_line=start, end_line=None))

    return ParsedSkillDocument(
        file_path=path,
        raw_text=raw_text,
        frontmatter=frontmatter,
        body=body,
        body_start_line=body_start,
        line_count=len(lines),
        headings=tuple(headings),
        links=tuple(links),
        code_blocks=tuple(blocks),
        url_line_count=sum(1 for line in lines if URL_LINE_PATTERN.search(line)),
    )


def read_markdown_text(path: Path) -> str:
    """Read a Markdown file as UTF-8, converting failures into parse errors."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SkillParseError(f"File is not valid UTF-8 text: {path}") from exc
    except OSError as exc:
        raise SkillParseError(f"Cannot read {path}: {exc}") from exc


def split_frontmatter(raw_text: str, path: Path) -> tuple[dict[str, Any] | None, str, int]:
    """Split text into ``(frontmatter, body, body_start_line)``.

    The body is everything after the closing delimiter line, returned
    verbatim. Without a leading ``---`` line the whole text is the body.
    """
    normalized = raw_text.lstrip("\ufeff")
    lines = normalized.splitlines(keepends=True)

    if not lines or lines[0].rstrip("\r\n") != FRONTMATTER_DELIMITER:
        return None, normalized, 1

    frontmatter_end = _find_frontmatter_end(lines)
    if frontmatter_end is None:
        raise SkillParseError(f"Unterminated frontmatter block in {path}")

    frontmatter_text = "".join(lines[1:frontmatter_end])
    try:
        payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
    except yaml.YAMLError as exc:
        raise SkillParseError(f"Failed to parse frontmatter in {path}: {exc}") from exc

    if payload is not None and not isinstance(payload, dict):
        raise SkillParseError(f"Frontmatter in {path} must be a YAML mapping")

    body = "".join(lines[frontmatter_end + 1 :])
    return payload, body, frontmatter_end + 2


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n") in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def _match_fence(line: str) -> tuple[str, str] | None:
    """Return ``(marker, info)`` for a fence line, else None."""
    match = FENCED_CODE_BLOCK_PATTERN.match(line)
    if not match:
        return None
    return match.group(1), match.group(2)


def _unique_anchor(anchor: str, seen: dict[str, int]) -> str:
    # Repeated headings get "-1", "-2" suffixes, as rendered by GitHub.
    count = seen.get(anchor, 0)
    seen[anchor] = count + 1
    return anchor if count == 0 else f"{anchor}-{count}"
