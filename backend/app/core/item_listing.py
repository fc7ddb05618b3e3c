"""Item Listing Rules — stock buckets, sort keys and display-code generation.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - Stock buckets: low = 0 < q < 10, out = q == 0, good = q >= 10
    - Display code = "ITEM" + zero-padded(existing count + 1, width 3)
    - Unknown sort keys fall back to ItemSortKey.NAME

Design Decisions:
    - Buckets expressed as half-open quantity ranges so the SQL filter in
      item_service and in-memory checks share one definition
    - LISTING_LOW_STOCK_LIMIT (10) intentionally differs from
      stock_levels.ITEM_LOW_STOCK_THRESHOLD (5); see DESIGN.md
"""

from dataclasses import dataclass

from app.core.domain_types import ItemSortKey, StockFilter

LISTING_LOW_STOCK_LIMIT = 10
DISPLAY_CODE_PREFIX = "ITEM"
DISPLAY_CODE_WIDTH = 3


@dataclass(frozen=True)
class ItemFilter:
    """Listing options for item queries. All fields optional."""
    search: str | None = None
    category: str | None = None
    stock: StockFilter | None = None
    sort: ItemSortKey = ItemSortKey.NAME

    @property
    def search_term(self) -> str | None:
        """Stripped search text, or None when blank."""
        if self.search is None:
            return None
        term = self.search.strip()
        return term or None


def stock_bounds(stock: StockFilter) -> tuple[int, int | None]:
    """Quantity range [lower, upper) for a stock bucket. upper=None means unbounded."""
    if stock is StockFilter.OUT:
        return 0, 1
    if stock is StockFilter.LOW:
        return 1, LISTING_LOW_STOCK_LIMIT
    return LISTING_LOW_STOCK_LIMIT, None


def in_stock_bucket(quantity: int, stock: StockFilter | None) -> bool:
    """True when quantity falls in the bucket. No bucket matches everything."""
    if stock is None:
        return True
    lower, upper = stock_bounds(stock)
    return quantity >= lower and (upper is None or quantity < upper)


def parse_stock_filter(raw: str | None) -> StockFilter | None:
    """Map a raw stock string to a bucket; anything unrecognised means no filter."""
    try:
        return StockFilter(raw) if raw else None
    except ValueError:
        return None


def parse_sort_key(raw: str | None) -> ItemSortKey:
    """Map a raw sort string to a key; anything unrecognised sorts by name."""
    try:
        return ItemSortKey(raw) if raw else ItemSortKey.NAME
    except ValueError:
        return ItemSortKey.NAME


def format_display_code(sequence: int) -> str:
    return f"{DISPLAY_CODE_PREFIX}{sequence:0{DISPLAY_CODE_WIDTH}d}"


def next_display_code(existing_count: int, taken: frozenset[str] = frozenset()) -> str:
    """Next sequential code for an inventory holding existing_count items.

    When earlier deletions left the natural code occupied, the sequence
    moves forward to the first free code instead of colliding.
    """
    sequence = existing_count + 1
    code = format_display_code(sequence)
    while code in taken:
        sequence += 1
        code = format_display_code(sequence)
    return code
