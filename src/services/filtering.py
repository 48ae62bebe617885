"""Search and sort over the product snapshot.

Pure functions: each call returns a new list and never mutates its input.
"""

SORTABLE_COLUMNS = ("id", "title", "price")

ASC = "asc"
DESC = "desc"

# Header glyphs (Material icon names)
ICON_ASC = "arrow_downward"
ICON_DESC = "arrow_upward"
ICON_UNSORTED = "swap_vert"


def filter_products(products: list, term: str | None) -> list:
    """Return the products whose title contains *term*, case-insensitively.

    An empty or whitespace-only term returns every product, in order.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(products)
    return [p for p in products if needle in (p.title or "").lower()]


def _sort_key(column: str):
    if column == "title":
        return lambda p: (p.title or "").lower()
    return lambda p: getattr(p, column)


def sort_products(products: list, column: str, direction: str = ASC) -> list:
    """Sort by *column*; equal values keep their relative order."""
    return sorted(products, key=_sort_key(column), reverse=direction == DESC)


def toggle_sort(
    current_column: str | None, current_direction: str, column: str,
) -> tuple[str, str]:
    """Next (column, direction) after a click on *column*'s header."""
    if current_column == column:
        return column, DESC if current_direction == ASC else ASC
    return column, ASC


def sort_icon(column: str, sort_column: str | None, direction: str) -> str:
    if column != sort_column:
        return ICON_UNSORTED
    return ICON_ASC if direction == ASC else ICON_DESC


def sort_icons(sort_column: str | None, direction: str) -> dict[str, str]:
    return {c: sort_icon(c, sort_column, direction) for c in SORTABLE_COLUMNS}
