"""Shared type aliases for Skillbook."""

from .common import CheckStatus, JsonObject, JsonScalar, JsonValue, Severity
from .config import CategoryConfig, ChecksConfig

__all__ = [
    "CategoryConfig",
    "CheckStatus",
    "ChecksConfig",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Severity",
]
