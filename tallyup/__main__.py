"""CLI for the tallyup calculators.

Prints worked examples for each library. Calculations take no input from the
command line; import the functions for real use.

Usage:
    python -m tallyup calculator     # Arithmetic examples
    python -m tallyup cart           # Example carts with per-item breakdown
    python -m tallyup profit         # Profit/revenue examples
    python -m tallyup examples       # Everything
"""

from __future__ import annotations

from typing import Any, Callable

import typer
from rich.console import Console
from rich.table import Table

from tallyup import calculator
from tallyup.cart import calculate_cart_total
from tallyup.errors import CalculationError
from tallyup.models import CartSummary, ProfitResult
from tallyup.profit import calculate_profit_and_revenue

app = typer.Typer(
    name="tallyup",
    help="Validated calculators for arithmetic, carts and profit",
    no_args_is_help=True,
)
console = Console(stderr=True)

# (label, function, args)
CALCULATOR_EXAMPLES: list[tuple[str, Callable[..., Any], tuple]] = [
    ("Addition", calculator.add, (5, 3, 2)),
    ("Addition", calculator.add, (10, 20, 30, 40)),
    ("Subtraction", calculator.subtract, (10, 3, 2)),
    ("Subtraction", calculator.subtract, (100, 20, 10)),
    ("Multiplication", calculator.multiply, (5, 3, 2)),
    ("Multiplication", calculator.multiply, (2, 4, 5)),
    ("Division", calculator.divide, (100, 5, 2)),
    ("Division", calculator.divide, (144, 12)),
    ("Modulo", calculator.modulo, (17, 5)),
    ("Modulo", calculator.modulo, (20, 6)),
    ("Power", calculator.power, (2, 8)),
    ("Power", calculator.power, (5, 3)),
    ("Square root", calculator.square_root, (16,)),
    ("Square root", calculator.square_root, (144,)),
    ("Absolute value", calculator.absolute, (-15,)),
    ("Absolute value", calculator.absolute, (15,)),
    ("Rounding", calculator.round_half_up, (4.7,)),
    ("Rounding", calculator.round_up, (4.2,)),
    ("Rounding", calculator.round_down, (4.9,)),
]

CART_EXAMPLES: list[tuple[str, list[dict]]] = [
    ("Cart with multiple items", [
        {"name": "Laptop", "price": 999.99, "quantity": 1},
        {"name": "Mouse", "price": 29.99, "quantity": 2},
        {"name": "Keyboard", "price": 79.99, "quantity": 1},
    ]),
    ("Cart with single item", [
        {"name": "Phone", "price": 599.99, "quantity": 1},
    ]),
    ("Empty cart", []),
    ("Items without explicit quantity (defaults to 1)", [
        {"name": "Book", "price": 19.99},
        {"name": "Pen", "price": 2.99, "quantity": 3},
    ]),
]

# (label, sales_price, cost_price, quantity or None for the default)
PROFIT_EXAMPLES: list[tuple[str, float, float, float | None]] = [
    ("Single item", 100, 60, 1),
    ("Multiple items", 50, 30, 10),
    ("Default quantity (1)", 75, 50, None),
]


def _fmt_number(n: float) -> str:
    """Format a number without a trailing '.0' for whole values."""
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def _fmt_money(v: float) -> str:
    return f"{v:.2f}"


def _fail(e: CalculationError) -> None:
    console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1)


def render_calculator(console: Console) -> None:
    """Render a table of each calculator example and its result."""
    table = Table(title="Calculator Examples", show_header=True, header_style="bold")
    table.add_column("Operation", style="dim", min_width=14)
    table.add_column("Call", style="green")
    table.add_column("Result", justify="right")

    for label, fn, args in CALCULATOR_EXAMPLES:
        call = f"{fn.__name__}({', '.join(str(a) for a in args)})"
        table.add_row(label, call, _fmt_number(fn(*args)))

    console.print()
    console.print(table)
    console.print()


def render_cart(title: str, summary: CartSummary, console: Console) -> None:
    """Render one cart's per-item breakdown with its totals as caption."""
    table = Table(
        title=title,
        caption=f"Total: {_fmt_money(summary.total_amount)} ({_fmt_number(summary.item_count)} items)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Product", style="green", min_width=12)
    table.add_column("Price", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Item total", justify="right")

    if not summary.item_details:
        table.add_row("--", "[dim]empty[/dim]", "--", "--", "--")
    for d in summary.item_details:
        table.add_row(
            str(d.index),
            d.product_name,
            _fmt_money(d.price),
            _fmt_number(d.quantity),
            _fmt_money(d.item_total),
        )

    console.print()
    console.print(table)


def render_profit(rows: list[tuple[str, ProfitResult]], console: Console) -> None:
    """Render profit results side by side, one column per example."""
    table = Table(title="Profit & Revenue Examples", show_header=True, header_style="bold")
    table.add_column("Metric", style="dim", min_width=12)
    for label, _ in rows:
        table.add_column(label, justify="right", min_width=12)

    def _row(metric: str, getter: Callable[[ProfitResult], str]) -> None:
        table.add_row(metric, *(getter(r) for _, r in rows))

    _row("Quantity", lambda r: _fmt_number(r.quantity))
    _row("Revenue", lambda r: _fmt_money(r.revenue))
    _row("Total cost", lambda r: _fmt_money(r.total_cost))

    def profit(r: ProfitResult) -> str:
        color = "red" if r.is_loss else "green"
        return f"[{color}]{_fmt_money(r.profit)}[/{color}]"
    _row("Profit", profit)
    _row("Margin", lambda r: r.profit_margin)

    console.print()
    console.print(table)
    console.print()


@app.command("calculator")
def cmd_calculator() -> None:
    """Show arithmetic examples."""
    try:
        render_calculator(console)
    except CalculationError as e:
        _fail(e)


@app.command("cart")
def cmd_cart() -> None:
    """Show cart total examples."""
    try:
        for title, items in CART_EXAMPLES:
            render_cart(title, calculate_cart_total(items), console)
    except CalculationError as e:
        _fail(e)
    console.print()


@app.command("profit")
def cmd_profit() -> None:
    """Show profit and revenue examples."""
    rows = []
    try:
        for label, sales, cost, qty in PROFIT_EXAMPLES:
            if qty is None:
                result = calculate_profit_and_revenue(sales, cost)
            else:
                result = calculate_profit_and_revenue(sales, cost, qty)
            rows.append((label, result))
    except CalculationError as e:
        _fail(e)
    render_profit(rows, console)


@app.command("examples")
def cmd_examples() -> None:
    """Show every example."""
    cmd_calculator()
    cmd_cart()
    cmd_profit()


if __name__ == "__main__":
    app()
