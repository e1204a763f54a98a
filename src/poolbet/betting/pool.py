"""Per-actual-result stake aggregation.

For every possible actual result a bet keeps one :class:`StakePool`. Each
wager placed on the bet is fed to every pool and classified against that
pool's actual result:

- *winner*: its expected results share a result with the actual results;
- *loser*: they share nothing.

Two expected-result values that share nothing are *contrary*. A loser's
stake goes to the winners contrary to it, in proportion to their stake;
losers with no contrary winner fall into a leftover bucket that is split
among all winners. The pool keeps exactly the aggregates needed to answer
that split in O(P) per odds query:

- total winner stake;
- per possible value V, the stake of winners contrary to V;
- the leftover loser stake;
- per pair (V, L), the stake of losers expecting L when L is contrary to V.

Complexity: with n atomic results there are P = 2**n - 2 possible values,
so a pool holds O(P**2) numbers (dominated by the contrary-loser matrix)
and adding one wager to a bet touches O(P**2) cells across its P pools.
P is expected to stay in the tens.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from poolbet.betting.results import ResultSet
from poolbet.betting.wager import Wager


@dataclass(frozen=True)
class PoolSummary:
    """Point-in-time totals of one StakePool, safe to read without the bet's lock."""

    actual_results: ResultSet
    wager_count: int
    winner_stake: Decimal
    loser_stake: Decimal
    leftover_loser_stake: Decimal

    @property
    def has_winners(self) -> bool:
        return self.winner_stake > 0


class StakePool:
    """Aggregated stakes of all wagers for one fixed actual result.

    Parameters
    ----------
    actual_results : ResultSet
        The actual result this pool settles against.
    possible_results : Sequence[ResultSet]
        Every value a wager can expect; all aggregates are pre-seeded
        with zero for each of them.
    """

    def __init__(self, actual_results: ResultSet, possible_results: Sequence[ResultSet]):
        self.actual_results = actual_results
        self._possible_results = tuple(possible_results)

        self._winner_stake = Decimal(0)
        self._loser_stake = Decimal(0)
        self.wager_count = 0

        self._contrary_winner_stake: dict[ResultSet, Decimal] = {
            p: Decimal(0) for p in self._possible_results
        }
        # Expected values that no winner is contrary to (yet). Loser stake
        # on these keys has nobody specific to go to.
        self._leftover_loser_stake: dict[ResultSet, Decimal] = {
            p: Decimal(0) for p in self._possible_results
        }
        self._contrary_loser_stake: dict[ResultSet, dict[ResultSet, Decimal]] = {
            p: {q: Decimal(0) for q in self._possible_results}
            for p in self._possible_results
        }

    def add_wager(self, wager: Wager[ResultSet]) -> None:
        """Classify ``wager`` as winner or loser and fold in its stake."""
        if self.actual_results.shares_result_with(wager.expected_results):
            self._add_winner(wager)
        else:
            self._add_loser(wager)
        self.wager_count += 1

    def _add_winner(self, wager: Wager[ResultSet]) -> None:
        stake = wager.stake.value
        self._winner_stake += stake

        for possible in self._possible_results:
            if not possible.shares_result_with(wager.expected_results):
                self._leftover_loser_stake.pop(possible, None)
                self._contrary_winner_stake[possible] += stake

        # A winning expectation never collects loser stake
        self._leftover_loser_stake.pop(wager.expected_results, None)

    def _add_loser(self, wager: Wager[ResultSet]) -> None:
        stake = wager.stake.value
        expected = wager.expected_results
        self._loser_stake += stake

        if expected in self._leftover_loser_stake:
            self._leftover_loser_stake[expected] += stake

        for possible in self._possible_results:
            if not possible.shares_result_with(expected):
                self._contrary_loser_stake[possible][expected] += stake

    def has_winners(self) -> bool:
        return self._winner_stake > 0

    def total_winner_stake(self) -> Decimal:
        return self._winner_stake

    def total_loser_stake(self) -> Decimal:
        return self._loser_stake

    def has_contrary_winners(self, expected_results: ResultSet) -> bool:
        """True if some winner's expected results share nothing with ``expected_results``."""
        return self._contrary_winner_stake[expected_results] > 0

    def contrary_winner_stake(self, expected_results: ResultSet) -> Decimal:
        """Stake of the winners contrary to ``expected_results``."""
        return self._contrary_winner_stake[expected_results]

    def leftover_loser_stake(self) -> Decimal:
        """Stake of losers that no winner is contrary to."""
        return sum(self._leftover_loser_stake.values(), Decimal(0))

    def contrary_loser_stake(
        self, expected_results: ResultSet, contrary_expected_results: ResultSet
    ) -> Decimal:
        """Stake of losers expecting ``contrary_expected_results``, if contrary to ``expected_results``."""
        return self._contrary_loser_stake[expected_results][contrary_expected_results]

    def summary(self) -> PoolSummary:
        """Copy the headline aggregates into an immutable snapshot."""
        return PoolSummary(
            actual_results=self.actual_results,
            wager_count=self.wager_count,
            winner_stake=self._winner_stake,
            loser_stake=self._loser_stake,
            leftover_loser_stake=self.leftover_loser_stake(),
        )

    def __repr__(self) -> str:
        return (
            f"StakePool(actual={self.actual_results!r}, wagers={self.wager_count}, "
            f"winner_stake={self._winner_stake}, loser_stake={self._loser_stake})"
        )


class WagerPool:
    """All wagers of one bet plus a :class:`StakePool` per possible actual result."""

    def __init__(self, possible_results: Sequence[ResultSet]):
        self._possible_results = tuple(possible_results)
        self._pools: dict[ResultSet, StakePool] = {
            p: StakePool(p, self._possible_results) for p in self._possible_results
        }
        self._wagers: list[Wager[ResultSet]] = []
        self._registered: set[Wager[ResultSet]] = set()

    def for_actual_results(self, actual_results: ResultSet) -> StakePool:
        return self._pools[actual_results]

    def contains_wager(self, wager: Wager[ResultSet]) -> bool:
        return wager in self._registered

    @property
    def wagers(self) -> tuple[Wager[ResultSet], ...]:
        return tuple(self._wagers)

    def add_wager(self, wager: Wager[ResultSet]) -> None:
        """Register ``wager`` and fan it out to every per-actual-result pool."""
        self._registered.add(wager)
        self._wagers.append(wager)
        for pool in self._pools.values():
            pool.add_wager(wager)
