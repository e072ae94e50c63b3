"""String normalization helpers for heading anchors."""

from __future__ import annotations

from skillbook.constants.naming import ANCHOR_STRIP_PATTERN


def heading_anchor(text: str) -> str:
    """Return the GitHub-style anchor slug for a heading text."""
    slug = text.strip().lower()
    slug = ANCHOR_STRIP_PATTERN.sub("", slug)
    return slug.replace(" ", "-")
