"""Stock Levels — derived per-item and per-inventory figures.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Monetary results are Decimal quantized to 2 places
    - is_low_stock uses the entity threshold (quantity <= 5), NOT the listing
      threshold in item_listing.py (0 < quantity < 10); both are kept as-is
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Protocol

ITEM_LOW_STOCK_THRESHOLD = 5

_CENTS = Decimal("0.01")


class StockLine(Protocol):
    """Anything with a quantity and a unit price (ORM Item, test doubles)."""
    quantity: int
    price: Decimal


def to_money(value: Decimal | int | float) -> Decimal:
    return Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)


def line_value(quantity: int, price: Decimal) -> Decimal:
    """Value of one stock line: price x quantity."""
    return to_money(to_money(price) * quantity)


def is_low_stock(quantity: int) -> bool:
    return quantity <= ITEM_LOW_STOCK_THRESHOLD


def is_out_of_stock(quantity: int) -> bool:
    return quantity == 0


def total_quantity(lines: Iterable[StockLine]) -> int:
    return sum(line.quantity for line in lines)


def total_value(lines: Iterable[StockLine]) -> Decimal:
    """Sum of price x quantity across lines; 0.00 for an empty inventory."""
    return to_money(
        sum((line_value(line.quantity, line.price) for line in lines), Decimal("0")),
    )
