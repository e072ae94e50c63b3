"""Lint checks for skill documents and the surrounding workspace."""

from __future__ import annotations

from skillbook.checks.base import Check, CorpusCheck
from skillbook.checks.context import LintContext
from skillbook.checks.corpus import CORPUS_CHECKS
from skillbook.checks.document import DOCUMENT_CHECKS
from skillbook.config import SkillbookConfig


def build_document_checks(config: SkillbookConfig) -> list[Check]:
    """Instantiate enabled per-document checks in reporting order."""
    return [check_cls() for check_cls in DOCUMENT_CHECKS if config.check_enabled(check_cls.check_id)]


def build_corpus_checks(config: SkillbookConfig) -> list[CorpusCheck]:
    """Instantiate enabled workspace checks in reporting order."""
    return [check_cls() for check_cls in CORPUS_CHECKS if config.check_enabled(check_cls.check_id)]


def check_titles() -> dict[str, str]:
    """Return every check id mapped to its title, in reporting order."""
    return {check_cls.check_id: check_cls.title for check_cls in (*DOCUMENT_CHECKS, *CORPUS_CHECKS)}


__all__ = [
    "Check",
    "CorpusCheck",
    "LintContext",
    "build_corpus_checks",
    "build_document_checks",
    "check_titles",
]
