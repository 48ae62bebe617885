"""Page slicing and page-button metadata for the product table."""
import math
from dataclasses import dataclass, field

from config import MAX_PAGE_BUTTONS


@dataclass
class PageInfo:
    """Everything the pagination bar needs to draw itself."""

    page: int
    page_size: int
    total_items: int
    total_pages: int
    window: list[int] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def first_item(self) -> int:
        """1-based index of the first item on the page (0 when empty)."""
        if self.total_items == 0:
            return 0
        return min((self.page - 1) * self.page_size + 1, self.total_items)

    @property
    def last_item(self) -> int:
        return min(self.page * self.page_size, self.total_items)

    @property
    def visible(self) -> bool:
        """The bar is hidden when everything fits on one page."""
        return self.total_pages > 1


def total_pages(count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return math.ceil(count / page_size)


def paginate(items: list, page: int, page_size: int) -> list:
    """Return the slice of *items* shown on *page* (1-indexed).

    Pages past the end yield an empty list.
    """
    start = (page - 1) * page_size
    if start < 0:
        return []
    return items[start:start + page_size]


def page_window(current: int, total: int, max_buttons: int = MAX_PAGE_BUTTONS) -> list[int]:
    """Page numbers to show as buttons, centred on *current*.

    The window slides at either edge so that exactly
    ``min(max_buttons, total)`` numbers are returned.
    """
    if total <= 0:
        return []
    start = max(1, current - max_buttons // 2)
    end = min(total, start + max_buttons - 1)
    if end - start < max_buttons - 1:
        start = max(1, end - max_buttons + 1)
    return list(range(start, end + 1))


def build_page_info(total_items: int, page: int, page_size: int) -> PageInfo:
    pages = total_pages(total_items, page_size)
    return PageInfo(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=pages,
        window=page_window(page, pages),
    )
