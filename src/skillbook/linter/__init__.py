"""Lint orchestration for skill workspaces."""

from .orchestrator import evaluate_exit_code, lint_workspace

__all__ = ["evaluate_exit_code", "lint_workspace"]
