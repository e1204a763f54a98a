"""Atomic results and order-independent result sets.

A *result* is any hashable, non-None value the caller uses to name an
outcome ("home team wins"). A :class:`ResultSet` groups several of them:
it is what a multi-choice wager expects and what an actual outcome is
compared against.
"""

from __future__ import annotations

import operator
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass
from functools import cached_property, reduce

from poolbet.exceptions import NullArgumentError, OutOfRangeError
from poolbet.utils.sets import subsets


@dataclass(frozen=True, eq=False)
class Result:
    """An opaque atomic result, equal only to itself."""

    description: str = ""

    def __str__(self) -> str:
        return self.description or f"Result@{id(self):x}"


def describe(result: Hashable) -> str:
    """Human readable label for any result value."""
    return str(result)


def validate_results(results: Iterable[Hashable] | None, argument: str = "results") -> list:
    """Materialize a result collection, rejecting None, None elements and duplicates."""
    if results is None:
        raise NullArgumentError(argument)

    results = list(results)
    if any(r is None for r in results):
        raise OutOfRangeError("Specified value cannot contain None values.", argument)
    if len(set(results)) != len(results):
        raise OutOfRangeError("Specified value cannot contain duplicates.", argument)
    return results


class ResultSet:
    """Immutable, non-empty, duplicate-free set of results.

    Two result sets are equal when they hold the same results in any order.
    Iteration follows construction order.

    Parameters
    ----------
    results : Iterable
        Distinct, non-None, hashable results.
    """

    def __init__(self, results: Iterable[Hashable]):
        results = validate_results(results)
        if not results:
            raise OutOfRangeError("Specified value cannot be empty.", "results")

        self._results = tuple(results)
        self._members = frozenset(results)

    @classmethod
    def of(cls, *results: Hashable) -> ResultSet:
        """Build a result set from positional results: ``ResultSet.of(a, b)``."""
        return cls(results)

    @property
    def results(self) -> tuple[Hashable, ...]:
        return self._results

    @cached_property
    def subsets(self) -> tuple[ResultSet, ...]:
        """All non-empty proper subsets, computed on first access and kept."""
        return tuple(
            ResultSet(subset)
            for subset in subsets(self._results, include_empty=False, include_self=False)
        )

    def shares_result_with(self, other: ResultSet) -> bool:
        """True if at least one result is in both sets.

        A wager whose expected results share a result with the actual
        results is a winner; two sets that share nothing are *contrary*.
        """
        if other is None:
            raise NullArgumentError("other")
        return not self._members.isdisjoint(other._members)

    def label(self, separator: str = " + ") -> str:
        return separator.join(describe(r) for r in self._results)

    def __contains__(self, result: object) -> bool:
        return result in self._members

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return reduce(operator.xor, (hash(r) for r in self._members), 0)

    def __repr__(self) -> str:
        return f"ResultSet({{{self.label(', ')}}})"
