"""Data models for the tallyup calculators.

CartItem, CartItemDetail, CartSummary, ProfitResult — the typed structures
that flow from caller → cart/profit → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from tallyup.numeric import Number


class _Missing:
    """Marker for a field the caller left out (distinct from an explicit None)."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class CartItem:
    """One cart line as supplied by the caller.

    Fields are stored as given; validation happens in calculate_cart_total.
    A quantity left as MISSING resolves to 1; an explicit None is invalid.
    """

    price: Any
    quantity: Any = MISSING
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> CartItem:
        """Read a plain record (e.g. decoded JSON).

        Accepts ``name``, falling back to ``productName`` or ``product_name``.
        Empty names fall through to the next key.
        """
        name = d.get("name") or d.get("productName") or d.get("product_name")
        return cls(
            price=d.get("price"),
            quantity=d.get("quantity", MISSING),
            name=name or None,
        )


@dataclass(frozen=True)
class CartItemDetail:
    """Per-item breakdown of a calculated cart."""

    index: int
    price: Number
    quantity: Number
    item_total: Number
    product_name: str

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "price": self.price,
            "quantity": self.quantity,
            "item_total": self.item_total,
            "product_name": self.product_name,
        }


@dataclass(frozen=True)
class CartSummary:
    """Result of calculate_cart_total.

    total_amount is rounded to cents; item_count and per-item totals are not.
    """

    total_amount: Number = 0.0
    item_count: Number = 0
    item_details: list[CartItemDetail] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "total_amount": self.total_amount,
            "item_count": self.item_count,
            "item_details": [d.to_dict() for d in self.item_details],
        }


@dataclass(frozen=True)
class ProfitResult:
    """Result of calculate_profit_and_revenue."""

    revenue: Number
    total_cost: Number
    profit: Number
    profit_margin: str
    quantity: Number

    @property
    def is_loss(self) -> bool:
        return self.profit < 0

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "revenue": self.revenue,
            "total_cost": self.total_cost,
            "profit": self.profit,
            "profit_margin": self.profit_margin,
            "quantity": self.quantity,
        }
