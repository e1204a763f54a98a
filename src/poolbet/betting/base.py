"""Base bet interface shared by single- and multiple-choice bets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal
from typing import Generic, TypeVar

from poolbet.betting.outcome import Outcome
from poolbet.betting.wager import Settlement, Wager
from poolbet.utils.numbers import StakeValue

T = TypeVar("T")


class Bet(ABC, Generic[T]):
    """A market over a fixed set of possible results.

    ``T`` is the type of one possible result: an atomic result for
    single-choice bets, a ``ResultSet`` for multiple-choice bets.
    """

    @property
    @abstractmethod
    def possible_results(self) -> Sequence[T]:
        """Every value that can be wagered on or selected as the actual result."""
        ...

    @property
    @abstractmethod
    def wagers(self) -> Sequence[Wager[T]]:
        """Wagers placed on this bet, in placement order."""
        ...

    @abstractmethod
    def add_expected_results(self, expected_results: T, stake_value: StakeValue) -> Wager[T]:
        """Place a stake on ``expected_results`` and return the new wager."""
        ...

    @abstractmethod
    def get_odds(self, expected_results: T, actual_results: T) -> Decimal:
        """Current odds of ``expected_results`` if ``actual_results`` happen.

        Odds times a wager's stake is what that wager claims from the pool.
        Returns ``0`` when the actual results have no winners and the
        sentinel ``-1`` when ``expected_results`` would lose; check for the
        sentinel before multiplying by a stake.
        """
        ...

    @abstractmethod
    def get_outcome(self, wager: Wager[T], actual_results: T) -> Outcome:
        """Outcome of ``wager`` if ``actual_results`` happen."""
        ...

    @abstractmethod
    def is_winner(self, expected_results: T, actual_results: T) -> bool:
        """True if a wager on ``expected_results`` wins when ``actual_results`` happen."""
        ...

    def settle(self, actual_results: T) -> list[Settlement[T]]:
        """Outcome of every wager for ``actual_results``, in placement order."""
        return [
            Settlement(wager, self.get_outcome(wager, actual_results))
            for wager in self.wagers
        ]
