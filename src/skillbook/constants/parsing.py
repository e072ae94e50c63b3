"""Constants for parsing behavior."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
# YAML allows "..." as an explicit document end marker.
FRONTMATTER_ALT_DELIMITER: str = "..."

FENCED_CODE_BLOCK_PATTERN: Pattern[str] = re.compile(r"^(`{3,}|~{3,})\s*([^`\s]*)")
HEADING_PATTERN: Pattern[str] = re.compile(r"^(#{1,6})\s+(.+?)(?:\s+#+)?\s*$")
INLINE_LINK_PATTERN: Pattern[str] = re.compile(r"(?<!!)\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")
INLINE_CODE_PATTERN: Pattern[str] = re.compile(r"`[^`]*`")
URL_LINE_PATTERN: Pattern[str] = re.compile(r"https?://")

AGENT_SKILLS_SEPARATOR: str = ","
