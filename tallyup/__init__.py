"""tallyup — small validated calculators for arithmetic, carts and profit.

Three independent, pure function libraries:

    from tallyup import add, divide, round_half_up
    from tallyup import calculate_cart_total
    from tallyup import calculate_profit_and_revenue

Usage:
    python -m tallyup calculator     # Arithmetic examples
    python -m tallyup cart           # Cart total examples
    python -m tallyup profit         # Profit/revenue examples
    python -m tallyup examples       # All of the above
"""

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
from tallyup.cart import calculate_cart_total
from tallyup.errors import (
    CalculationError,
    DivisionByZeroError,
    InvalidTypeError,
    InvalidValueError,
    MissingArgumentError,
)
from tallyup.models import CartItem, CartItemDetail, CartSummary, ProfitResult
from tallyup.profit import calculate_profit_and_revenue

__all__ = [
    "absolute",
    "add",
    "divide",
    "modulo",
    "multiply",
    "power",
    "round_down",
    "round_half_up",
    "round_up",
    "square_root",
    "subtract",
    "calculate_cart_total",
    "calculate_profit_and_revenue",
    "CartItem",
    "CartItemDetail",
    "CartSummary",
    "ProfitResult",
    "CalculationError",
    "DivisionByZeroError",
    "InvalidTypeError",
    "InvalidValueError",
    "MissingArgumentError",
]

__version__ = "0.1.0"
