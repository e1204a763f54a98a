"""Single-choice parimutuel bet.

Exactly one atomic result happens, and only wagers on that very result
win. Implemented as a thin adapter over :class:`MultipleChoiceBet`: every
result is lifted into a one-element :class:`ResultSet` on the way in.
"""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterable
from decimal import Decimal

from poolbet.betting.base import Bet
from poolbet.betting.multiple_choice import MultipleChoiceBet
from poolbet.betting.outcome import Outcome
from poolbet.betting.results import ResultSet, validate_results
from poolbet.betting.wager import Settlement, Wager
from poolbet.exceptions import ForeignWagerError, NotPossibleError, NullArgumentError
from poolbet.utils.numbers import StakeValue


class SingleChoiceBet(Bet[Hashable]):
    """Parimutuel bet over mutually exclusive atomic results.

    Parameters
    ----------
    possible_results : Iterable
        The atomic results; non-empty, free of None values and duplicates.
        As with multiple-choice bets, a single result on its own leaves
        nothing to bet against: the bet then has no possible results.
    """

    def __init__(self, possible_results: Iterable[Hashable]):
        results = validate_results(possible_results, "possible_results")
        self._multiple_choice_bet = MultipleChoiceBet(results)
        self._possible_results = tuple(results) if len(results) > 1 else ()
        self._wagers: dict[Wager[Hashable], Wager[ResultSet]] = {}
        self._lock = threading.RLock()

    @property
    def possible_results(self) -> tuple[Hashable, ...]:
        return self._possible_results

    @property
    def wagers(self) -> tuple[Wager[Hashable], ...]:
        with self._lock:
            return tuple(self._wagers)

    def _lift(self, result: Hashable | None, argument: str) -> ResultSet:
        if result is None:
            raise NullArgumentError(argument)
        try:
            lifted = ResultSet.of(result)
        except TypeError:
            raise NotPossibleError(argument) from None
        if lifted not in self._multiple_choice_bet.possible_results:
            raise NotPossibleError(argument)
        return lifted

    def add_expected_results(
        self, expected_results: Hashable, stake_value: StakeValue
    ) -> Wager[Hashable]:
        """Place ``stake_value`` on the atomic result ``expected_results``."""
        lifted = self._lift(expected_results, "expected_results")

        with self._lock:
            inner = self._multiple_choice_bet.add_expected_results(lifted, stake_value)
            wager = Wager(self, expected_results, inner.stake)
            self._wagers[wager] = inner
        return wager

    def get_odds(self, expected_results: Hashable, actual_results: Hashable) -> Decimal:
        return self._multiple_choice_bet.get_odds(
            self._lift(expected_results, "expected_results"),
            self._lift(actual_results, "actual_results"),
        )

    def get_outcome(self, wager: Wager[Hashable], actual_results: Hashable) -> Outcome:
        if wager is None:
            raise NullArgumentError("wager")

        with self._lock:
            inner = self._wagers.get(wager)
            if inner is None:
                raise ForeignWagerError("wager")
            return self._multiple_choice_bet.get_outcome(
                inner, self._lift(actual_results, "actual_results")
            )

    def is_winner(self, expected_results: Hashable, actual_results: Hashable) -> bool:
        self._lift(expected_results, "expected_results")
        self._lift(actual_results, "actual_results")
        return expected_results == actual_results

    def settle(self, actual_results: Hashable) -> list[Settlement[Hashable]]:
        with self._lock:
            return super().settle(actual_results)

    def __repr__(self) -> str:
        return f"SingleChoiceBet(results={len(self._possible_results)}, wagers={len(self._wagers)})"
