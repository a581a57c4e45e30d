"""Shared constants and aliases for path values."""

from filepath.types.base import SEPARATOR

__all__ = ["SEPARATOR"]
