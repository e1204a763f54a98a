"""poolbet: parimutuel odds calculation and wager settlement."""

from poolbet.betting import (
    MultipleChoiceBet,
    Outcome,
    OutcomeType,
    Result,
    ResultSet,
    SingleChoiceBet,
    Wager,
)
from poolbet.exceptions import (
    BettingError,
    ForeignWagerError,
    InvalidArgumentError,
    InvalidStateError,
    NotMemberError,
    NotPossibleError,
    NullArgumentError,
    OutOfRangeError,
)

__version__ = "0.1.0"

__all__ = [
    "MultipleChoiceBet",
    "SingleChoiceBet",
    "Result",
    "ResultSet",
    "Outcome",
    "OutcomeType",
    "Wager",
    "BettingError",
    "InvalidArgumentError",
    "NullArgumentError",
    "NotMemberError",
    "NotPossibleError",
    "ForeignWagerError",
    "OutOfRangeError",
    "InvalidStateError",
]
