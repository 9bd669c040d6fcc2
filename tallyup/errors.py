"""Exceptions raised by the tallyup calculators.

Every failure is raised straight to the caller. Each class also derives from
the matching builtin (TypeError / ValueError / ZeroDivisionError) so callers
can catch them without importing tallyup.
"""

from __future__ import annotations

from typing import Optional


class CalculationError(Exception):
    """Base class for all tallyup errors.

    Attributes:
        argument: Name of the offending argument or field, if known.
        index: Position of the offending argument or cart item, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: Optional[str] = None,
        index: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.argument = argument
        self.index = index


class MissingArgumentError(CalculationError, TypeError):
    """A required argument was not supplied."""


class InvalidTypeError(CalculationError, TypeError):
    """An argument is not a number, is NaN, or has the wrong shape."""


class InvalidValueError(CalculationError, ValueError):
    """A number is valid but outside the operation's domain."""


class DivisionByZeroError(InvalidValueError, ZeroDivisionError):
    """A divisor was exactly zero."""
