"""Tests for tallyup.calculator.

Covers each operation's happy path, argument validation, the zero/negative
domain errors, and the IEEE edge cases of modulo and power.
"""

import math

import pytest

from tallyup.calculator import (
    absolute,
    add,
    divide,
    modulo,
    multiply,
    power,
    round_down,
    round_half_up,
    round_up,
    square_root,
    subtract,
)
from tallyup.errors import (
    CalculationError,
    DivisionByZeroError,
    InvalidTypeError,
    InvalidValueError,
    MissingArgumentError,
)


# --- Addition (4 tests) ---

def test_add_three():
    assert add(5, 3, 2) == 10


def test_add_four():
    assert add(10, 20, 30, 40) == 100


def test_add_no_arguments():
    with pytest.raises(MissingArgumentError):
        add()


def test_add_rejects_invalid_anywhere():
    """A bad value late in the list still aborts the whole call."""
    with pytest.raises(InvalidTypeError) as exc:
        add(1, 2, "3")
    assert exc.value.index == 2


# --- Subtraction (3 tests) ---

def test_subtract():
    assert subtract(10, 3, 2) == 5
    assert subtract(100, 20, 10) == 70


def test_subtract_no_subtrahends_returns_first():
    assert subtract(7.5) == 7.5


def test_subtract_invalid_first():
    with pytest.raises(InvalidTypeError) as exc:
        subtract(None, 1)
    assert exc.value.argument == "first"


# --- Multiplication (3 tests) ---

def test_multiply():
    assert multiply(5, 3, 2) == 30
    assert multiply(2, 4, 5) == 40


def test_multiply_single():
    assert multiply(7) == 7


def test_multiply_no_arguments():
    with pytest.raises(MissingArgumentError):
        multiply()


# --- Division (5 tests) ---

def test_divide_left_to_right():
    assert divide(100, 5, 2) == pytest.approx(10.0)
    assert divide(144, 12) == pytest.approx(12.0)


def test_divide_requires_divisor():
    with pytest.raises(MissingArgumentError):
        divide(10)


def test_divide_by_zero():
    with pytest.raises(InvalidValueError) as exc:
        divide(10, 0)
    assert exc.value.index == 1


def test_divide_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        divide(10, 2, 0.0)


def test_divide_invalid_divisor():
    with pytest.raises(InvalidTypeError):
        divide(10, 2, float("nan"))


# --- Modulo (4 tests) ---

def test_modulo():
    assert modulo(17, 5) == 2
    assert modulo(20, 6) == 2


def test_modulo_truncates_toward_zero():
    """Sign follows the dividend, unlike Python's floored %."""
    assert modulo(-7, 3) == -1
    assert modulo(7, -3) == 1
    assert modulo(-7.5, 2) == pytest.approx(-1.5)


def test_modulo_by_zero():
    with pytest.raises(DivisionByZeroError):
        modulo(5, 0)


def test_modulo_infinite_operands():
    assert math.isnan(modulo(math.inf, 3))
    assert modulo(5, math.inf) == 5


# --- Power (4 tests) ---

def test_power():
    assert power(2, 8) == 256
    assert power(5, 3) == 125


def test_power_fractional_and_negative_exponents():
    assert power(16, 0.5) == pytest.approx(4.0)
    assert power(2, -2) == pytest.approx(0.25)


def test_power_negative_base_fractional_exponent_is_nan():
    assert math.isnan(power(-8, 1 / 3))


def test_power_infinite_results():
    assert power(0, -1) == math.inf
    assert power(-0.0, -3) == -math.inf
    assert power(10, 400) == math.inf
    assert power(-10, 401) == -math.inf


# --- Square root / absolute (4 tests) ---

def test_square_root():
    assert square_root(16) == 4
    assert square_root(144) == 12


def test_square_root_negative():
    with pytest.raises(InvalidValueError):
        square_root(-1)


def test_absolute():
    assert absolute(-15) == 15
    assert absolute(15) == 15


def test_absolute_rejects_bool():
    with pytest.raises(InvalidTypeError):
        absolute(True)


# --- Rounding (4 tests) ---

def test_rounding():
    assert round_half_up(4.7) == 5
    assert round_up(4.2) == 5
    assert round_down(4.9) == 4


def test_round_half_up_ties_go_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.49999999999999994) == 0


def test_rounding_returns_int_for_finite():
    assert isinstance(round_half_up(1.2), int)
    assert isinstance(round_up(1.2), int)
    assert isinstance(round_down(1.2), int)


def test_rounding_passes_infinity():
    assert round_half_up(math.inf) == math.inf
    assert round_up(-math.inf) == -math.inf
    assert round_down(math.inf) == math.inf


# --- Validation (4 tests) ---

@pytest.mark.parametrize("bad", ["4", None, float("nan"), [1], False])
def test_single_argument_operations_reject_non_numbers(bad):
    for fn in (square_root, absolute, round_half_up, round_up, round_down):
        with pytest.raises(InvalidTypeError):
            fn(bad)


@pytest.mark.parametrize("fn, args, argument, index", [
    (modulo, ("17", 5), "dividend", 0),
    (modulo, (17, None), "divisor", 1),
    (power, (float("nan"), 2), "base", 0),
    (power, (2, "8"), "exponent", 1),
])
def test_two_operand_errors_name_the_operand(fn, args, argument, index):
    with pytest.raises(InvalidTypeError) as exc:
        fn(*args)
    assert exc.value.argument == argument
    assert exc.value.index == index


def test_errors_share_base_class():
    for call in (lambda: add(), lambda: add("x"), lambda: square_root(-4)):
        with pytest.raises(CalculationError):
            call()


def test_pure_and_repeatable():
    assert divide(1, 3) == divide(1, 3)
    assert power(1.1, 7) == power(1.1, 7)
