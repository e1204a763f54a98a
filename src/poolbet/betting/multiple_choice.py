"""Multiple-choice parimutuel bet.

The actual result of a multiple-choice bet is a set of atomic results. A
wager wins if its expected results share at least one atomic result with
the actual results. Winners split the losers' stakes:

- each loser's stake goes to the winners *contrary* to it (their expected
  results share nothing with the loser's), pro rata to their stake;
- losers that no winner is contrary to are split among all winners, pro
  rata to their stake.

If nobody wins, the bet is canceled for everyone.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterable
from decimal import Decimal, localcontext

from poolbet.betting.base import Bet
from poolbet.betting.outcome import Outcome
from poolbet.betting.pool import PoolSummary, StakePool, WagerPool
from poolbet.betting.results import ResultSet, validate_results
from poolbet.betting.wager import Settlement, Stake, Wager
from poolbet.config import settings
from poolbet.constants import LOSER_ODDS_SENTINEL, NO_WINNERS_ODDS
from poolbet.exceptions import (
    ForeignWagerError,
    NotPossibleError,
    NullArgumentError,
    OutOfRangeError,
)
from poolbet.utils.logging import get_logger
from poolbet.utils.numbers import StakeValue, to_positive_decimal

log = get_logger(__name__)


class MultipleChoiceBet(Bet[ResultSet]):
    """Parimutuel bet whose possible results are sets of atomic results.

    Parameters
    ----------
    available_results : Iterable
        The atomic results. Must be non-empty, free of None values and
        duplicates. The possible results of the bet are all non-empty
        proper subsets of these; a bet over a single atomic result
        therefore has no possible results and accepts no wagers.
    """

    def __init__(self, available_results: Iterable[Hashable]):
        results = validate_results(available_results, "available_results")
        if not results:
            raise OutOfRangeError("Specified value cannot be empty.", "available_results")

        self.available_results = tuple(results)
        self._possible_results = ResultSet(results).subsets
        self._possible_lookup = frozenset(self._possible_results)
        self._pool = WagerPool(self._possible_results)
        self._lock = threading.RLock()

        log.debug(
            "bet_created",
            kind="multiple_choice",
            results=len(self.available_results),
            possible_results=len(self._possible_results),
        )

    @property
    def possible_results(self) -> tuple[ResultSet, ...]:
        return self._possible_results

    @property
    def wagers(self) -> tuple[Wager[ResultSet], ...]:
        with self._lock:
            return self._pool.wagers

    def _require_possible(self, results: ResultSet | None, argument: str) -> ResultSet:
        if results is None:
            raise NullArgumentError(argument)
        if not isinstance(results, ResultSet) or results not in self._possible_lookup:
            raise NotPossibleError(argument)
        return results

    def add_expected_results(
        self, expected_results: ResultSet, stake_value: StakeValue
    ) -> Wager[ResultSet]:
        """Place ``stake_value`` on ``expected_results``.

        Raises NullArgumentError for None arguments, NotPossibleError if
        ``expected_results`` is not a possible result, and OutOfRangeError
        if the stake is not a strictly positive finite number. Nothing is
        recorded when any check fails.
        """
        self._require_possible(expected_results, "expected_results")
        value = to_positive_decimal(stake_value)

        wager = Wager(self, expected_results, Stake(value))
        with self._lock:
            self._pool.add_wager(wager)

        log.debug("wager_added", expected=expected_results.label(), stake=str(value))
        return wager

    def get_odds(self, expected_results: ResultSet, actual_results: ResultSet) -> Decimal:
        """Odds of ``expected_results`` for ``actual_results``.

        ``0`` if ``actual_results`` has no winners; the sentinel ``-1`` if
        ``expected_results`` shares nothing with ``actual_results``.
        Otherwise the winnings per unit of stake::

            sum(contrary_loser_stake(expected, V) / contrary_winner_stake(V)
                for every V that has contrary winners)
            + leftover_loser_stake / total_winner_stake
        """
        self._require_possible(expected_results, "expected_results")
        self._require_possible(actual_results, "actual_results")

        with self._lock:
            return self._odds(self._pool.for_actual_results(actual_results), expected_results)

    def _odds(self, pool: StakePool, expected_results: ResultSet) -> Decimal:
        if not pool.has_winners():
            return NO_WINNERS_ODDS
        if not expected_results.shares_result_with(pool.actual_results):
            return LOSER_ODDS_SENTINEL

        with localcontext() as ctx:
            ctx.prec = settings.decimal_precision

            # Loser stakes contrary to the expected results, each divided
            # among the winners contrary to that loser.
            odds = sum(
                (
                    pool.contrary_loser_stake(expected_results, possible)
                    / pool.contrary_winner_stake(possible)
                    for possible in self._possible_results
                    if pool.has_contrary_winners(possible)
                ),
                Decimal(0),
            )

            # Losers nobody is contrary to are divided among all winners.
            odds += pool.leftover_loser_stake() / pool.total_winner_stake()

        return odds

    def get_outcome(self, wager: Wager[ResultSet], actual_results: ResultSet) -> Outcome:
        """Outcome of ``wager`` for ``actual_results``.

        Raises NullArgumentError for None arguments, ForeignWagerError if
        the wager was placed on another bet, NotPossibleError if
        ``actual_results`` is not a possible result.
        """
        if wager is None:
            raise NullArgumentError("wager")

        with self._lock:
            if not self._pool.contains_wager(wager):
                raise ForeignWagerError("wager")
            self._require_possible(actual_results, "actual_results")

            pool = self._pool.for_actual_results(actual_results)
            if not pool.has_winners():
                log.debug("bet_canceled", actual=actual_results.label())
                return Outcome.canceled()

            if not wager.expected_results.shares_result_with(actual_results):
                return Outcome.loss()

            odds = self._odds(pool, wager.expected_results)
            with localcontext() as ctx:
                ctx.prec = settings.decimal_precision
                return Outcome.win(odds * wager.stake.value)

    def is_winner(self, expected_results: ResultSet, actual_results: ResultSet) -> bool:
        """True if ``expected_results`` share a result with ``actual_results``.

        Both arguments are validated like every other query.
        """
        self._require_possible(expected_results, "expected_results")
        self._require_possible(actual_results, "actual_results")
        return expected_results.shares_result_with(actual_results)

    def pool_for(self, actual_results: ResultSet) -> PoolSummary:
        """Snapshot of the pool for ``actual_results``, taken under the bet's lock."""
        self._require_possible(actual_results, "actual_results")
        with self._lock:
            return self._pool.for_actual_results(actual_results).summary()

    def settle(self, actual_results: ResultSet) -> list[Settlement[ResultSet]]:
        with self._lock:
            return super().settle(actual_results)

    def __repr__(self) -> str:
        return (
            f"MultipleChoiceBet(results={len(self.available_results)}, "
            f"possible_results={len(self._possible_results)}, wagers={len(self._pool.wagers)})"
        )
