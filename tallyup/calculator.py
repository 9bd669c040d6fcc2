"""Basic arithmetic with argument validation.

Every function checks all of its arguments before computing anything, so a
single bad value anywhere in a variadic call raises without a partial result.
A valid number is an int or float that is neither bool nor NaN; infinities are
allowed and follow IEEE double semantics.
"""

from __future__ import annotations

import math

from tallyup.errors import (
    DivisionByZeroError,
    InvalidValueError,
    MissingArgumentError,
)
from tallyup.numeric import Number, nearest_int, require_number

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "modulo",
    "power",
    "square_root",
    "absolute",
    "round_half_up",
    "round_up",
    "round_down",
]

_ALL_VALID = "All arguments must be valid numbers"


def _require_all(numbers: tuple, message: str = _ALL_VALID, offset: int = 0) -> None:
    """Validate a variadic argument list up front.

    Raises:
        InvalidTypeError: on the first invalid entry, with its position.
    """
    for i, num in enumerate(numbers):
        require_number(num, message, index=i + offset)


def _require_pair(first: object, second: object, first_name: str, second_name: str) -> None:
    """Validate a two-operand call, naming whichever operand is bad."""
    for index, (value, name) in enumerate(((first, first_name), (second, second_name))):
        require_number(value, "Both arguments must be valid numbers", argument=name, index=index)


def add(*numbers: Number) -> Number:
    """Sum one or more numbers.

    Raises:
        MissingArgumentError: If called with no arguments.
        InvalidTypeError: If any argument is not a valid number.
    """
    if not numbers:
        raise MissingArgumentError("At least one number is required", argument="numbers")
    _require_all(numbers)
    total: Number = 0
    for num in numbers:
        total += num
    return total


def subtract(first: Number, *numbers: Number) -> Number:
    """Subtract the sum of *numbers* from *first*.

    With no subtrahends, *first* is returned unchanged.
    """
    require_number(first, "First argument must be a valid number", argument="first")
    if not numbers:
        return first
    _require_all(numbers, offset=1)
    subtrahend: Number = 0
    for num in numbers:
        subtrahend += num
    return first - subtrahend


def multiply(*numbers: Number) -> Number:
    """Multiply one or more numbers."""
    if not numbers:
        raise MissingArgumentError("At least one number is required", argument="numbers")
    _require_all(numbers)
    product: Number = 1
    for num in numbers:
        product *= num
    return product


def divide(dividend: Number, *divisors: Number) -> float:
    """Divide *dividend* by each divisor in turn, left to right.

    Raises:
        MissingArgumentError: If no divisor is given.
        InvalidTypeError: If the dividend or any divisor is not a valid number.
        DivisionByZeroError: If any divisor is exactly zero.
    """
    require_number(dividend, "Dividend must be a valid number", argument="dividend")
    if not divisors:
        raise MissingArgumentError("At least one divisor is required", argument="divisors")
    _require_all(divisors, "All divisors must be valid numbers", offset=1)
    for i, divisor in enumerate(divisors, start=1):
        if divisor == 0:
            raise DivisionByZeroError(
                "Division by zero is not allowed", argument="divisors", index=i
            )

    result: float = dividend
    for divisor in divisors:
        result = result / divisor
    return result


def modulo(dividend: Number, divisor: Number) -> Number:
    """Remainder of truncated division; the sign follows the dividend.

    modulo(-7, 3) == -1, unlike Python's ``%`` which floors and gives 2.
    """
    _require_pair(dividend, divisor, "dividend", "divisor")
    if divisor == 0:
        raise DivisionByZeroError("Division by zero is not allowed", argument="divisor")
    if isinstance(dividend, int) and isinstance(divisor, int):
        remainder = abs(dividend) % abs(divisor)
        return remainder if dividend >= 0 else -remainder
    if isinstance(dividend, float) and math.isinf(dividend):
        return math.nan
    return math.fmod(dividend, divisor)


def power(base: Number, exponent: Number) -> float:
    """Raise *base* to *exponent* with IEEE ``pow`` results.

    Where :func:`math.pow` raises, the IEEE value is returned instead: NaN for
    a negative base with a fractional exponent, an infinity for zero to a
    negative power or on overflow.
    """
    _require_pair(base, exponent, "base", "exponent")
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0:
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf


def _is_odd_integer(value: Number) -> bool:
    if isinstance(value, int):
        return value % 2 == 1
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def square_root(number: Number) -> float:
    """Non-negative square root.

    Raises:
        InvalidValueError: If *number* is negative.
    """
    require_number(number, argument="number")
    if number < 0:
        raise InvalidValueError(
            "Cannot calculate square root of negative number", argument="number"
        )
    return math.sqrt(number)


def absolute(number: Number) -> Number:
    """Absolute value."""
    require_number(number, argument="number")
    return abs(number)


def round_half_up(number: Number) -> Number:
    """Round to the nearest integer; .5 goes up (round_half_up(-2.5) == -2)."""
    require_number(number, argument="number")
    return nearest_int(number)


def round_up(number: Number) -> Number:
    """Ceiling; infinities pass through."""
    require_number(number, argument="number")
    if isinstance(number, float) and math.isinf(number):
        return number
    return math.ceil(number)


def round_down(number: Number) -> Number:
    """Floor; infinities pass through."""
    require_number(number, argument="number")
    if isinstance(number, float) and math.isinf(number):
        return number
    return math.floor(number)
