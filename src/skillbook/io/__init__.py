"""Shared file I/O helpers."""

from .files import atomic_writer, read_json, write_json_atomic, write_text_atomic

__all__ = ["atomic_writer", "read_json", "write_json_atomic", "write_text_atomic"]
