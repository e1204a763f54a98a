"""Stakes, wagers and settlements."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Generic, TypeVar

from poolbet.betting.outcome import Outcome, OutcomeType

if TYPE_CHECKING:
    from poolbet.betting.base import Bet

T = TypeVar("T")


@dataclass(frozen=True)
class Stake:
    """Amount put on a wager. Positivity is checked by the bet, not here."""

    value: Decimal


@dataclass(frozen=True, eq=False)
class Wager(Generic[T]):
    """A stake placed on one expected result of a bet.

    Wagers compare and hash by identity: two wagers with the same expected
    results and stake are still different wagers. Only the owning bet
    creates them (see ``Bet.add_expected_results``).
    """

    bet: Bet[T]
    expected_results: T
    stake: Stake

    def get_outcome(self, actual_results: T) -> Outcome:
        """Outcome of this wager if ``actual_results`` happen."""
        return self.bet.get_outcome(self, actual_results)

    def __repr__(self) -> str:
        return f"Wager(expected={self.expected_results!r}, stake={self.stake.value})"


@dataclass(frozen=True)
class Settlement(Generic[T]):
    """A wager together with its outcome for one actual result."""

    wager: Wager[T]
    outcome: Outcome

    @property
    def payout(self) -> Decimal:
        """Total returned to the bettor: stake plus winnings, the stake alone, or nothing."""
        if self.outcome.type is OutcomeType.WIN:
            return self.wager.stake.value + self.outcome.winnings
        if self.outcome.type is OutcomeType.CANCELED:
            return self.wager.stake.value
        return Decimal(0)
