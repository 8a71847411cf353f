"""
Pure helpers for ordered, immutable sequences.

Every helper takes a tuple and returns a new tuple; inputs are never
modified. Helpers return the input tuple itself when nothing changes so
callers can detect no-ops with an identity check.
"""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def index_of(items: tuple[T, ...], predicate: Callable[[T], bool]) -> int:
    """Index of the first item matching predicate, or -1."""
    for i, item in enumerate(items):
        if predicate(item):
            return i
    return -1


def append(items: tuple[T, ...], item: T) -> tuple[T, ...]:
    return items + (item,)


def remove_at(items: tuple[T, ...], index: int) -> tuple[T, ...]:
    if not 0 <= index < len(items):
        return items
    return items[:index] + items[index + 1:]


def replace_at(items: tuple[T, ...], index: int, item: T) -> tuple[T, ...]:
    if not 0 <= index < len(items) or items[index] is item:
        return items
    return items[:index] + (item,) + items[index + 1:]


def clamp_index(index: int, length: int) -> int:
    """Clamp index into [0, length - 1] (0 for an empty sequence)."""
    if length <= 0:
        return 0
    return max(0, min(index, length - 1))


def move(items: tuple[T, ...], from_index: int, to_index: int) -> tuple[T, ...]:
    """
    Relocate the item at from_index so it ends up at to_index.

    Items between the two positions shift by one towards from_index.
    to_index is clamped to the valid range.
    """
    if not 0 <= from_index < len(items):
        return items
    to_index = clamp_index(to_index, len(items))
    if from_index == to_index:
        return items
    item = items[from_index]
    rest = items[:from_index] + items[from_index + 1:]
    return rest[:to_index] + (item,) + rest[to_index:]
