"""Exception hierarchy for the betting engine.

Every error is raised synchronously by local validation and is not
retryable: the caller has to correct the input. Validation runs before
any pool or registry is touched, so a rejected call leaves the bet
unchanged.

Exception Classes:
- BettingError: Base exception
- InvalidArgumentError: A rejected argument (also a ValueError)
- NullArgumentError: A required argument is None
- NotMemberError: A value does not belong to the bet
- NotPossibleError: A result (set) is not one of the bet's possible results
- ForeignWagerError: A wager was placed on a different bet
- OutOfRangeError: Stake not strictly positive, or a bad result collection
- InvalidStateError: Winnings read from an outcome that is not a win
"""

from __future__ import annotations


class BettingError(Exception):
    """Base class for all betting engine errors."""


class InvalidArgumentError(BettingError, ValueError):
    """An argument was rejected.

    Parameters
    ----------
    message : str
        Human readable reason.
    argument : str | None
        Name of the offending parameter, when known.
    """

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument

    def __str__(self) -> str:
        message = super().__str__()
        if self.argument:
            return f"{message} (argument: {self.argument})"
        return message


class NullArgumentError(InvalidArgumentError):
    """A required argument is None."""

    def __init__(self, argument: str):
        super().__init__("Specified value cannot be None.", argument)


class NotMemberError(InvalidArgumentError):
    """A value is not a member of the bet it was used with."""


class NotPossibleError(NotMemberError):
    """A result or result set is not one of the bet's possible results."""

    def __init__(self, argument: str):
        super().__init__("Specified value must be one of the possible results.", argument)


class ForeignWagerError(NotMemberError):
    """A wager does not belong to the bet being queried."""

    def __init__(self, argument: str = "wager"):
        super().__init__("Specified wager is not part of this bet.", argument)


class OutOfRangeError(InvalidArgumentError):
    """A value is outside its accepted range (stake <= 0, duplicates, None elements)."""


class InvalidStateError(BettingError, RuntimeError):
    """An operation is not valid for the object's current state."""
