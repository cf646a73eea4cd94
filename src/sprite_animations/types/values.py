"""Lenient conversion of JSON values read from documents."""

from __future__ import annotations

from typing import Any


def to_int(value: Any, default: int = 0) -> int:
    """Integer for a JSON number, or ``default`` for null and other types."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return default


def to_float(value: Any, default: float = 0.0) -> float:
    """Float for a JSON number, or ``default`` for null and other types."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    return default


def to_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    return default
