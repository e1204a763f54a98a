"""Settlement outcome of a single wager."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from poolbet.exceptions import InvalidStateError


class OutcomeType(str, Enum):
    """How a wager ended for one actual result.

    WIN keeps the stake and claims winnings, LOSS forfeits the stake, and
    CANCELED returns the stake because the pool had no winners at all.
    """

    WIN = "win"
    LOSS = "loss"
    CANCELED = "canceled"


@dataclass(frozen=True)
class Outcome:
    """Outcome of a wager: its type and, for wins only, the winnings."""

    type: OutcomeType
    _winnings: Decimal = field(default=Decimal(0), repr=False)

    @property
    def winnings(self) -> Decimal:
        """Amount won on top of the returned stake.

        Raises InvalidStateError unless the outcome is a win.
        """
        if self.type is not OutcomeType.WIN:
            raise InvalidStateError(f"Outcome type is not a win: {self.type.value}.")
        return self._winnings

    @property
    def is_win(self) -> bool:
        return self.type is OutcomeType.WIN

    @classmethod
    def win(cls, winnings: Decimal) -> Outcome:
        return cls(OutcomeType.WIN, winnings)

    @classmethod
    def loss(cls) -> Outcome:
        return cls(OutcomeType.LOSS)

    @classmethod
    def canceled(cls) -> Outcome:
        return cls(OutcomeType.CANCELED)

    def __repr__(self) -> str:
        if self.is_win:
            return f"Outcome(WIN, winnings={self._winnings})"
        return f"Outcome({self.type.name})"
