"""Check identifiers, severities and ordering."""

from __future__ import annotations

FRONTMATTER: str = "FRONTMATTER"
NAME_MATCH: str = "NAME_MATCH"
CODE_FENCES: str = "CODE_FENCES"
LOCAL_LINKS: str = "LOCAL_LINKS"
LINE_COUNT: str = "LINE_COUNT"
SOURCES_SECTION: str = "SOURCES_SECTION"
SOURCE_URLS: str = "SOURCE_URLS"
CODE_BLOCKS: str = "CODE_BLOCKS"
REQUIRED_SECTIONS: str = "REQUIRED_SECTIONS"
AGENT_REFERENCE: str = "AGENT_REFERENCE"
SKILL_FILE: str = "SKILL_FILE"

DUPLICATE_NAME: str = "DUPLICATE_NAME"
AGENT_SKILLS_EXIST: str = "AGENT_SKILLS_EXIST"
PIPELINE_SYNC: str = "PIPELINE_SYNC"

DOCUMENT_CHECK_IDS: tuple[str, ...] = (
    FRONTMATTER,
    NAME_MATCH,
    CODE_FENCES,
    LOCAL_LINKS,
    LINE_COUNT,
    SOURCES_SECTION,
    SOURCE_URLS,
    CODE_BLOCKS,
    REQUIRED_SECTIONS,
    AGENT_REFERENCE,
)
CORPUS_CHECK_IDS: tuple[str, ...] = (DUPLICATE_NAME, AGENT_SKILLS_EXIST, PIPELINE_SYNC)
ALL_CHECK_IDS: frozenset[str] = frozenset((*DOCUMENT_CHECK_IDS, *CORPUS_CHECK_IDS))

# Contract checks that still run for utility skills.
UTILITY_CHECK_IDS: frozenset[str] = frozenset({FRONTMATTER, NAME_MATCH, CODE_FENCES, LOCAL_LINKS})

SEVERITY_RANK: dict[str, int] = {"warning": 1, "error": 2}
VALID_SEVERITIES: frozenset[str] = frozenset(SEVERITY_RANK)

STATUS_PASS: str = "pass"
STATUS_FAIL: str = "fail"
STATUS_SKIP: str = "skip"

SOURCES_HEADING_KEYWORDS: tuple[str, ...] = ("sources", "references")
LINK_IGNORED_SCHEMES: tuple[str, ...] = ("http://", "https://", "mailto:", "tel:", "ftp://", "data:")
