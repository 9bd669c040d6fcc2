"""Shared numeric checks and rounding for the tallyup calculators."""

from __future__ import annotations

import math
from typing import Union

from tallyup.errors import InvalidTypeError

Number = Union[int, float]


def is_number(value: object) -> bool:
    """True for int/float values that are not bool and not NaN.

    Infinities count as numbers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


def require_number(
    value: object,
    message: str = "Argument must be a valid number",
    *,
    argument: str | None = None,
    index: int | None = None,
) -> Number:
    """Return *value* unchanged, or raise InvalidTypeError if it is not a number."""
    if not is_number(value):
        raise InvalidTypeError(message, argument=argument, index=index)
    return value  # type: ignore[return-value]


def nearest_int(value: Number) -> Number:
    """Round to the nearest integer, ties toward positive infinity.

    nearest_int(2.5) == 3 and nearest_int(-2.5) == -2. Infinities are
    returned unchanged; everything else yields an int.
    """
    if isinstance(value, int) or not math.isfinite(value):
        return value
    floor = math.floor(value)
    # floor(value + 0.5) would turn 0.49999999999999994 into 1
    return floor + 1 if value - floor >= 0.5 else floor
