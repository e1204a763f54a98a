"""Combinatorial helpers for result collections."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def subsets(
    items: Sequence[T],
    include_empty: bool = True,
    include_self: bool = True,
) -> list[tuple[T, ...]]:
    """Enumerate the powerset of ``items``.

    Classic binary construction: every subset of ``items`` either takes the
    first element or not, followed by a subset of the remaining elements.
    Elements keep their relative order inside each subset; the order of the
    subsets themselves is unspecified.

    Args:
        items: Distinct elements.
        include_empty: Keep the empty subset.
        include_self: Keep the subset containing every element.
    """
    items = tuple(items)
    result = [
        subset
        for subset in _powerset(items)
        if (include_empty or subset) and (include_self or len(subset) != len(items))
    ]
    return result


def _powerset(items: tuple[T, ...]) -> list[tuple[T, ...]]:
    if not items:
        return [()]
    first, rest = items[0], items[1:]
    without = _powerset(rest)
    with_first = [(first, *subset) for subset in without]
    return with_first + without
