"""Profit and revenue calculation.

Computes revenue, total cost, profit and profit margin for a number of units
sold at a given sales and cost price.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from tallyup.errors import InvalidTypeError, InvalidValueError
from tallyup.models import ProfitResult
from tallyup.numeric import Number, is_number

DEFAULT_QUANTITY = 1
MARGIN_DECIMALS = 2

_MARGIN_QUANTUM = Decimal(1).scaleb(-MARGIN_DECIMALS)  # Decimal("0.01")


def format_margin(margin: float) -> str:
    """Render a percentage with MARGIN_DECIMALS places and a trailing '%'.

    Ties are rounded away from zero on the exact binary value, so 12.125
    becomes "12.13%" where ``f"{12.125:.2f}"`` would give "12.12".
    """
    if not math.isfinite(margin):
        return f"{margin}%"
    exact = Decimal(margin)
    # quantize fails once the result has more digits than the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + MARGIN_DECIMALS + 2)
        q = exact.quantize(_MARGIN_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{q:f}%"


def calculate_profit_and_revenue(
    sales_price: Number,
    cost_price: Number,
    quantity: Number = DEFAULT_QUANTITY,
) -> ProfitResult:
    """Calculate revenue, cost, profit and margin.

    Args:
        sales_price: Selling price per unit.
        cost_price: Cost price per unit.
        quantity: Units sold (default 1).

    Returns:
        ProfitResult. profit_margin is profit as a percentage of revenue,
        "0.00%" when revenue is zero.

    Raises:
        InvalidTypeError: If any argument is not a valid number.
        InvalidValueError: If any argument is negative.
    """
    if not all(is_number(v) for v in (sales_price, cost_price, quantity)):
        raise InvalidTypeError("All parameters must be numbers")
    if sales_price < 0 or cost_price < 0 or quantity < 0:
        raise InvalidValueError("Prices and quantity must be non-negative")

    revenue = sales_price * quantity
    total_cost = cost_price * quantity
    profit = revenue - total_cost
    margin = (profit / revenue) * 100 if revenue > 0 else 0.0

    return ProfitResult(
        revenue=revenue,
        total_cost=total_cost,
        profit=profit,
        profit_margin=format_margin(margin),
        quantity=quantity,
    )
