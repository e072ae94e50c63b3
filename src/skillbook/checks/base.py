"""Check interfaces for skill and corpus lint rules."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from skillbook.checks.context import LintContext
from skillbook.constants.checks import STATUS_FAIL, STATUS_PASS, STATUS_SKIP, VALID_SEVERITIES
from skillbook.model import CheckResult, Evidence, Skill
from skillbook.types import CategoryConfig, Severity

_CHECK_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")


class _CheckMixin:
    check_id: ClassVar[str]
    severity: ClassVar[Severity]
    title: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate subclasses define an UPPER_SNAKE_CASE `check_id`, a known severity and a title."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        check_id = getattr(cls, "check_id", None)
        if not isinstance(check_id, str) or not check_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `check_id`")
        if not _CHECK_ID_PATTERN.match(check_id):
            raise TypeError(f"{cls.__name__}.check_id must be UPPER_SNAKE_CASE (got {check_id!r})")
        if getattr(cls, "severity", None) not in VALID_SEVERITIES:
            raise TypeError(f"{cls.__name__}.severity must be one of {sorted(VALID_SEVERITIES)}")
        if not isinstance(getattr(cls, "title", None), str) or not cls.title.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `title`")

    def passed(self, message: str = "") -> CheckResult:
        return CheckResult(check_id=self.check_id, status=STATUS_PASS, severity=self.severity, message=message)

    def skipped(self, message: str = "") -> CheckResult:
        return CheckResult(check_id=self.check_id, status=STATUS_SKIP, severity=self.severity, message=message)

    def failed(
        self,
        message: str,
        *,
        evidence: Evidence | None = None,
        details: tuple[str, ...] = (),
    ) -> CheckResult:
        return CheckResult(
            check_id=self.check_id,
            status=STATUS_FAIL,
            severity=self.severity,
            message=message,
            evidence=evidence,
            details=details,
        )


class Check(_CheckMixin, ABC):
    """A rule evaluated once per skill document."""

    @abstractmethod
    def run(self, *, skill: Skill, category: CategoryConfig, context: LintContext) -> CheckResult:
        """Run the check on one loaded skill."""


class CorpusCheck(_CheckMixin, ABC):
    """A rule evaluated once across the whole workspace."""

    @abstractmethod
    def run(self, *, context: LintContext) -> CheckResult:
        """Run the check on the workspace."""
