"""Helpers for ordered id sequences."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def array_move(items: Sequence[T], from_index: int, to_index: int) -> tuple[T, ...]:
    """
    Move the element at from_index to to_index, returning a new tuple.

    The element is removed first and then inserted, so moving down the list
    shifts the elements in between up by one and vice versa. Equal indices
    return the items unchanged.

    Example: array_move(["a", "b", "c"], 2, 0) -> ("c", "a", "b")
    """
    result = list(items)
    if from_index == to_index:
        return tuple(result)
    if not (0 <= from_index < len(result)) or not (0 <= to_index < len(result)):
        raise IndexError(
            f"array_move indices out of range: {from_index} -> {to_index} (len {len(result)})"
        )
    item = result.pop(from_index)
    result.insert(to_index, item)
    return tuple(result)


def without(items: Sequence[T], item: T) -> tuple[T, ...]:
    """Return items with every occurrence of item removed, order preserved."""
    return tuple(x for x in items if x != item)


def insert_at(items: Sequence[T], index: int, item: T) -> tuple[T, ...]:
    """Return items with item inserted at index (clamped to the end)."""
    result = list(items)
    result.insert(index, item)
    return tuple(result)
