"""Shopping-cart totals.

calculate_cart_total validates every line, accumulates price × quantity and
the unit count, and returns a per-item breakdown in input order. The first
invalid line aborts the whole call; the error names the line's index.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from tallyup.errors import InvalidTypeError, InvalidValueError
from tallyup.models import MISSING, CartItem, CartItemDetail, CartSummary
from tallyup.numeric import Number, is_number, nearest_int

DEFAULT_QUANTITY = 1
TOTAL_DECIMALS = 2
FALLBACK_NAME = "Product {n}"

CartLine = Union[CartItem, Mapping[str, Any]]


def _round_total(amount: Number) -> float:
    """Round to TOTAL_DECIMALS places, half up on the scaled value."""
    scale = 10 ** TOTAL_DECIMALS
    return nearest_int(amount * scale) / scale


def _as_cart_item(line: object, index: int) -> CartItem:
    if isinstance(line, CartItem):
        return line
    if isinstance(line, Mapping):
        return CartItem.from_dict(line)
    raise InvalidTypeError(f"Item at index {index} must be a mapping", index=index)


def _validate(item: CartItem, index: int) -> tuple[Number, Number]:
    """Return (price, quantity) for a line, or raise naming the bad field.

    Numeric checks run before sign checks, price before quantity.
    """
    price = item.price
    quantity = item.quantity if item.quantity is not MISSING else DEFAULT_QUANTITY

    if not is_number(price):
        raise InvalidTypeError(
            f"Item at index {index} must have a valid numeric price",
            argument="price", index=index,
        )
    if not is_number(quantity):
        raise InvalidTypeError(
            f"Item at index {index} must have a valid numeric quantity",
            argument="quantity", index=index,
        )
    if price < 0:
        raise InvalidValueError(
            f"Item at index {index} price cannot be negative",
            argument="price", index=index,
        )
    if quantity < 0:
        raise InvalidValueError(
            f"Item at index {index} quantity cannot be negative",
            argument="quantity", index=index,
        )
    return price, quantity


def calculate_cart_total(items: Sequence[CartLine]) -> CartSummary:
    """Total a cart.

    Args:
        items: list or tuple of CartItem instances or mappings with ``price``
            (required), ``quantity`` (default 1) and ``name``/``productName``.

    Returns:
        CartSummary with total_amount rounded to cents, the summed quantity,
        and one CartItemDetail per line.

    Raises:
        InvalidTypeError: If *items* is not a list/tuple, a line is not a
            mapping, or a price/quantity is not a valid number.
        InvalidValueError: If a price or quantity is negative.
    """
    if not isinstance(items, (list, tuple)):
        raise InvalidTypeError("Cart items must be a list", argument="items")

    if not items:
        return CartSummary(total_amount=0.0, item_count=0, item_details=[])

    total_amount: Number = 0
    item_count: Number = 0
    details: list[CartItemDetail] = []

    for index, line in enumerate(items):
        item = _as_cart_item(line, index)
        price, quantity = _validate(item, index)

        item_total = price * quantity
        total_amount += item_total
        item_count += quantity

        details.append(CartItemDetail(
            index=index,
            price=price,
            quantity=quantity,
            item_total=item_total,
            product_name=item.name or FALLBACK_NAME.format(n=index + 1),
        ))

    return CartSummary(
        total_amount=_round_total(total_amount),
        item_count=item_count,
        item_details=details,
    )
