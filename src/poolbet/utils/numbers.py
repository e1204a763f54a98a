"""Decimal coercion for stake values."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from poolbet.exceptions import NullArgumentError, OutOfRangeError

StakeValue = Decimal | int | float | str


def to_decimal(value: StakeValue, argument: str = "stake_value") -> Decimal:
    """Convert an int, float, str or Decimal to a finite Decimal.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion. Booleans are rejected even though they are
    ints.
    """
    if value is None:
        raise NullArgumentError(argument)
    if isinstance(value, bool):
        raise OutOfRangeError("Specified value must be a number, not a boolean.", argument)

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, float):
        number = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            number = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise OutOfRangeError(f"Cannot parse {value!r} as a number.", argument) from None
    else:
        raise OutOfRangeError(
            f"Specified value must be a number, got {type(value).__name__}.", argument
        )

    if not number.is_finite():
        raise OutOfRangeError("Specified value must be a finite number.", argument)
    return number


def to_positive_decimal(value: StakeValue, argument: str = "stake_value") -> Decimal:
    """Like :func:`to_decimal` but also rejects zero and negative values."""
    number = to_decimal(value, argument)
    if number <= 0:
        raise OutOfRangeError(
            "Specified value cannot be less than or equal to zero.", argument
        )
    return number
