"""Regex patterns used for heading anchors."""

from __future__ import annotations

import re
from re import Pattern

# GitHub-style heading anchors keep word characters, spaces and hyphens.
ANCHOR_STRIP_PATTERN: Pattern[str] = re.compile(r"[^\w\- ]+")
