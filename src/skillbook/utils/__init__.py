"""Shared utility helpers."""

from __future__ import annotations

from .naming import heading_anchor

__all__ = ["heading_anchor"]
