"""Utility functions."""

from .array import array_move, insert_at, without
from .datetime import now_utc, parse_date
from .ids import (
    COLUMN_PREFIX,
    TASK_PREFIX,
    IdGenerator,
    sequential_suffixes,
)

__all__ = [
    "COLUMN_PREFIX",
    "TASK_PREFIX",
    "IdGenerator",
    "array_move",
    "insert_at",
    "now_utc",
    "parse_date",
    "sequential_suffixes",
    "without",
]
